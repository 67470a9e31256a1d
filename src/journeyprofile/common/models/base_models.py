# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict


class ProfileBaseModel(BaseModel):
    """Base model for all profile value objects.

    Instances are immutable once built, and unknown keys are rejected so that a
    misspelled field in a profile document fails loudly instead of being ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
