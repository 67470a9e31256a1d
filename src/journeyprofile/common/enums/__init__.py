# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from journeyprofile.common.enums.base_enums import CaseInsensitiveStrEnum
from journeyprofile.common.enums.profile_enums import (
    BoundaryAction,
    IfEarly,
    IfLate,
    RunState,
    SchedulingMode,
)

__all__ = [
    "BoundaryAction",
    "CaseInsensitiveStrEnum",
    "IfEarly",
    "IfLate",
    "RunState",
    "SchedulingMode",
]
