# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from journeyprofile.common.mixins.profile_logger_mixin import ProfileLoggerMixin

__all__ = ["ProfileLoggerMixin"]
