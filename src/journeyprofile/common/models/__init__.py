# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from journeyprofile.common.models.base_models import ProfileBaseModel
from journeyprofile.common.models.profile_models import (
    Configuration,
    Scenario,
    Scheduled,
)

__all__ = [
    "Configuration",
    "ProfileBaseModel",
    "Scenario",
    "Scheduled",
]
