# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import Field

from journeyprofile.common.models.base_models import ProfileBaseModel


class RunLimits(ProfileBaseModel):
    """Optional bounds on a profile run.

    Weighted profiles never end on their own, so a weighted run without limits
    continues until it is cancelled. Scheduled runs also honor the limits, in
    addition to ending at the last journey or when the boundary policy ends them.
    """

    max_journeys: int | None = Field(
        default=None,
        ge=0,
        description="Maximum number of journeys to start. None means no limit.",
    )
    max_duration_sec: float | None = Field(
        default=None,
        gt=0,
        description="Maximum run time in seconds. No journey is started once it has elapsed.",
    )
