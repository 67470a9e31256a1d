# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from journeyprofile.run.config import RunLimits
from journeyprofile.run.counter import JourneyCounter
from journeyprofile.run.lifecycle import RunLifecycle
from journeyprofile.run.runner import (
    JourneyExecutor,
    JourneyStep,
    ProfileRunner,
    RunSummary,
)
from journeyprofile.run.stop_conditions import (
    DurationStopCondition,
    JourneyCountStopCondition,
    LifecycleStopCondition,
    StopCondition,
    StopConditionChecker,
)

__all__ = [
    "DurationStopCondition",
    "JourneyCountStopCondition",
    "JourneyCounter",
    "JourneyExecutor",
    "JourneyStep",
    "LifecycleStopCondition",
    "ProfileRunner",
    "RunLifecycle",
    "RunLimits",
    "RunSummary",
    "StopCondition",
    "StopConditionChecker",
]
