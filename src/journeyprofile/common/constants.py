# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared numeric constants."""

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

TIMESTAMP_SEPARATOR = ":"
"""Separator between the hours, minutes and seconds of a scenario timestamp."""

TRACE_LEVEL = 5
"""Log level below DEBUG used for very chatty per-draw output."""
