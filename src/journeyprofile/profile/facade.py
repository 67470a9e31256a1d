# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Single entry point that turns a profile and a journey pool into a plan.

Example::

    profile = Profile(configuration)
    plan = profile.apply(available_journeys)

    if isinstance(plan, ScheduledPlan):
        async for entry in plan.iter_due(cancel_event):
            await run_journey(entry.journey)
    else:
        for journey in plan:  # unbounded, the caller decides when to stop
            ...
"""

import time
from collections.abc import Callable, Iterable
from pathlib import Path

from journeyprofile.common.enums import SchedulingMode
from journeyprofile.common.exceptions import InvalidStateError
from journeyprofile.common.mixins import ProfileLoggerMixin
from journeyprofile.common.models import Configuration
from journeyprofile.profile.boundary_policy import BoundaryPolicyEngine
from journeyprofile.profile.deterministic import DeterministicScheduler
from journeyprofile.profile.journey_pool import JourneyPool, JourneyProtocol
from journeyprofile.profile.loader import load_configuration
from journeyprofile.profile.plan import ScheduledPlan
from journeyprofile.profile.validator import ScenarioValidator
from journeyprofile.profile.weighted import WeightedScheduler

ProfilePlan = ScheduledPlan | WeightedScheduler
"""A time-ordered plan for scheduled profiles, or an unbounded draw source for weighted ones."""


class Profile(ProfileLoggerMixin):
    """A validated-on-apply profile configuration.

    apply() validates the configuration against the pool (failing fast, with the
    validator's error propagated unchanged), selects the scheduler from the
    populated scenario fields, and attaches the boundary policy to scheduled plans.
    It only reads the pool.
    """

    def __init__(
        self,
        configuration: Configuration,
        *,
        seed: int | None = None,
        clock: Callable[[], float] = time.perf_counter,
        tolerance_sec: float | None = None,
    ) -> None:
        """
        Args:
            configuration: The profile to apply.
            seed: Fixed seed for weighted selection. None derives from the global generator.
            clock: Monotonic clock used by the boundary policy.
            tolerance_sec: Seconds past a timestamp that still count as on time.
        """
        super().__init__()
        self._configuration = configuration
        self._seed = seed
        self._clock = clock
        self._tolerance_sec = tolerance_sec

    @classmethod
    def from_file(cls, path: str | Path, **kwargs) -> "Profile":
        """Load a profile document (JSON or YAML) and wrap it."""
        return cls(load_configuration(path), **kwargs)

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def apply(
        self, pool: JourneyPool | Iterable[JourneyProtocol]
    ) -> ProfilePlan:
        """Validate against ``pool`` and build the plan.

        Raises:
            ProfileValidationError: If the configuration is invalid for the pool.
        """
        journey_pool = JourneyPool.coerce(pool)
        mode = ScenarioValidator(self._configuration, journey_pool).validate()

        match mode:
            case SchedulingMode.SCHEDULED:
                return DeterministicScheduler(
                    self._configuration, journey_pool
                ).build_plan(policy=self._build_policy())
            case SchedulingMode.WEIGHTED:
                return WeightedScheduler(
                    self._configuration, journey_pool, seed=self._seed
                )
            case _:
                raise InvalidStateError(f"Unsupported scheduling mode: {mode!r}")

    def _build_policy(self) -> BoundaryPolicyEngine | None:
        scheduled = self._configuration.scheduled
        if scheduled is None:
            return None
        return BoundaryPolicyEngine(
            scheduled, clock=self._clock, tolerance_sec=self._tolerance_sec
        )


def apply_profile(
    configuration: Configuration,
    pool: JourneyPool | Iterable[JourneyProtocol],
    **kwargs,
) -> ProfilePlan:
    """Shortcut for ``Profile(configuration, **kwargs).apply(pool)``."""
    return Profile(configuration, **kwargs).apply(pool)
