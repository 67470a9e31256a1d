# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Stop conditions for profile runs.

Evaluates whether another journey may start based on lifecycle state, the
number of journeys started so far, and the configured limits. Pure read-only,
never mutates state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from journeyprofile.run.config import RunLimits
    from journeyprofile.run.lifecycle import RunLifecycle
    from journeyprofile.run.counter import JourneyCounter


class StopCondition(ABC):
    """Abstract base class for a stop condition."""

    def __init__(
        self,
        limits: RunLimits,
        lifecycle: RunLifecycle,
        counter: JourneyCounter,
    ) -> None:
        self._limits = limits
        self._lifecycle = lifecycle
        self._counter = counter

    @classmethod
    @abstractmethod
    def should_use(cls, limits: RunLimits) -> bool:
        """Returns True if the stop condition applies to the given limits."""

    @abstractmethod
    def can_start_journey(self) -> bool:
        """True if the run may start another journey."""


class LifecycleStopCondition(StopCondition):
    """Stops once the run is cancelled or complete.

    NOTE: This is always used and is the first in the list of stop conditions.
    """

    @classmethod
    def should_use(cls, limits: RunLimits) -> bool:
        return True

    def can_start_journey(self) -> bool:
        return not self._lifecycle.was_cancelled and not self._lifecycle.is_complete


class JourneyCountStopCondition(StopCondition):
    """Journey count based stop condition."""

    @classmethod
    def should_use(cls, limits: RunLimits) -> bool:
        return limits.max_journeys is not None

    def can_start_journey(self) -> bool:
        return self._counter.started < self._limits.max_journeys


class DurationStopCondition(StopCondition):
    """Duration based stop condition."""

    @classmethod
    def should_use(cls, limits: RunLimits) -> bool:
        return limits.max_duration_sec is not None

    def can_start_journey(self) -> bool:
        return self._lifecycle.time_left_in_seconds() > 0


# NOTE: The order of these classes determines the order the conditions are checked in.
_STOP_CONDITION_CLASSES: list[type[StopCondition]] = [
    LifecycleStopCondition,  # Always used first
    JourneyCountStopCondition,
    DurationStopCondition,
]


class StopConditionChecker:
    """Evaluates whether another journey may start. First condition reached wins."""

    def __init__(
        self,
        limits: RunLimits,
        lifecycle: RunLifecycle,
        counter: JourneyCounter,
    ) -> None:
        self._stop_conditions: list[StopCondition] = [
            stop_condition_class(limits, lifecycle, counter)
            for stop_condition_class in _STOP_CONDITION_CLASSES
            if stop_condition_class.should_use(limits)
        ]
        self._can_start_journey_funcs: list[Callable[[], bool]] = [
            stop_condition.can_start_journey for stop_condition in self._stop_conditions
        ]

    @property
    def stop_conditions(self) -> list[StopCondition]:
        return list(self._stop_conditions)

    def can_start_journey(self) -> bool:
        return all(func() for func in self._can_start_journey_funcs)

    def first_reached(self) -> StopCondition | None:
        """The first condition preventing another journey, if any."""
        for stop_condition in self._stop_conditions:
            if not stop_condition.can_start_journey():
                return stop_condition
        return None
