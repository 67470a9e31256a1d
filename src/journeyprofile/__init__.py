# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from journeyprofile.common.models import Configuration, Scenario, Scheduled
from journeyprofile.profile import (
    Journey,
    JourneyPool,
    Profile,
    ScheduledPlan,
    WeightedScheduler,
    apply_profile,
    load_configuration,
)

__all__ = [
    "Configuration",
    "Journey",
    "JourneyPool",
    "Profile",
    "Scenario",
    "Scheduled",
    "ScheduledPlan",
    "WeightedScheduler",
    "apply_profile",
    "load_configuration",
]
