# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from journeyprofile.profile.boundary_policy import (
    BoundaryDecision,
    BoundaryPolicyEngine,
    ScheduledRun,
)
from journeyprofile.profile.deterministic import DeterministicScheduler
from journeyprofile.profile.duration_codec import format_timestamp, parse_timestamp
from journeyprofile.profile.facade import Profile, ProfilePlan, apply_profile
from journeyprofile.profile.journey_pool import Journey, JourneyPool, JourneyProtocol
from journeyprofile.profile.loader import load_configuration, parse_configuration
from journeyprofile.profile.plan import PlanEntry, ScheduledPlan
from journeyprofile.profile.validator import ScenarioValidator, validate_configuration
from journeyprofile.profile.weighted import (
    WeightedDraw,
    WeightedJourneyStream,
    WeightedScheduler,
)

__all__ = [
    "BoundaryDecision",
    "BoundaryPolicyEngine",
    "DeterministicScheduler",
    "Journey",
    "JourneyPool",
    "JourneyProtocol",
    "PlanEntry",
    "Profile",
    "ProfilePlan",
    "ScenarioValidator",
    "ScheduledPlan",
    "ScheduledRun",
    "WeightedDraw",
    "WeightedJourneyStream",
    "WeightedScheduler",
    "apply_profile",
    "format_timestamp",
    "load_configuration",
    "parse_configuration",
    "parse_timestamp",
    "validate_configuration",
]
