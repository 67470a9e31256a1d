# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from journeyprofile.common.enums.base_enums import CaseInsensitiveStrEnum


class SchedulingMode(CaseInsensitiveStrEnum):
    """How a profile orders its journeys. Resolved from which scenario fields are populated."""

    SCHEDULED = "scheduled"
    """Every scenario has a timestamp; journeys run in timestamp order."""

    WEIGHTED = "weighted"
    """Every scenario has a weight; journeys are drawn at random, without end."""


class IfEarly(CaseInsensitiveStrEnum):
    """What a scheduled run does when it reaches a journey before its timestamp."""

    SLEEP = "sleep"
    """Block until the journey's timestamp is reached, then run it."""


class IfLate(CaseInsensitiveStrEnum):
    """What a scheduled run does when a journey's timestamp has already passed."""

    END = "end"
    """Terminate the run, discarding the remaining scheduled journeys."""


class BoundaryAction(CaseInsensitiveStrEnum):
    """The outcome of comparing elapsed run time with a journey's timestamp."""

    PROCEED = "proceed"
    """The run is on time; execute the journey now."""

    SLEEP = "sleep"
    """The run is early; wait for the remaining delay, then execute the journey."""

    END = "end"
    """The run is late; stop without executing the journey or any after it."""


class RunState(CaseInsensitiveStrEnum):
    """Lifecycle states of a profile run."""

    CREATED = "created"
    STARTED = "started"
    COMPLETE = "complete"
