# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Drives a profile plan against a journey executor.

The runner does not know how to execute a journey. The harness supplies an async
executor that is awaited once per journey, one journey at a time::

    async def execute(journey, step):
        await harness.run(journey.display_name, **step.scenario.extras)

    runner = ProfileRunner(profile.apply(pool), execute, limits=RunLimits(max_journeys=500))
    summary = await runner.run()

Scheduled plans are paced by their boundary policy. Weighted streams are drawn
until a stop condition is reached or the run is cancelled.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from contextlib import aclosing
from dataclasses import dataclass, field

from journeyprofile.common.enums import SchedulingMode
from journeyprofile.common.exceptions import InvalidStateError
from journeyprofile.common.mixins import ProfileLoggerMixin
from journeyprofile.profile.journey_pool import JourneyProtocol
from journeyprofile.profile.plan import PlanEntry, ScheduledPlan
from journeyprofile.profile.weighted import WeightedDraw, WeightedScheduler
from journeyprofile.run.config import RunLimits
from journeyprofile.run.counter import JourneyCounter
from journeyprofile.run.lifecycle import RunLifecycle
from journeyprofile.run.stop_conditions import StopConditionChecker

JourneyStep = PlanEntry | WeightedDraw
JourneyExecutor = Callable[[JourneyProtocol, JourneyStep], Awaitable[object]]


@dataclass
class RunSummary:
    """Outcome of a profile run."""

    mode: SchedulingMode
    executed: list[str] = field(default_factory=list)
    """Display names of the journeys started, in execution order."""
    failed: int = 0
    ended_late: bool = False
    """A scheduled run was terminated by its IfLate policy."""
    cancelled: bool = False
    limit_reached: bool = False
    """A RunLimits bound stopped the run."""
    discarded: int = 0
    """Scheduled journeys that were never started."""
    elapsed_sec: float = 0.0

    @property
    def journeys_executed(self) -> int:
        return len(self.executed)


class ProfileRunner(ProfileLoggerMixin):
    """Runs one plan, once.

    Args:
        plan: A ScheduledPlan or WeightedScheduler, as returned by Profile.apply().
        executor: Awaited once per journey with the journey and its plan step.
        limits: Optional bounds on the run.
        continue_on_error: Log executor failures and carry on instead of
            propagating the first one.
        clock: Monotonic clock for the run lifecycle.
    """

    def __init__(
        self,
        plan: ScheduledPlan | WeightedScheduler,
        executor: JourneyExecutor,
        *,
        limits: RunLimits | None = None,
        continue_on_error: bool = False,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__()
        if isinstance(plan, ScheduledPlan):
            self._mode = SchedulingMode.SCHEDULED
        elif isinstance(plan, WeightedScheduler):
            self._mode = SchedulingMode.WEIGHTED
        else:
            raise TypeError(
                f"Expected a ScheduledPlan or WeightedScheduler, got {type(plan).__name__}"
            )
        self._plan = plan
        self._executor = executor
        self._limits = limits or RunLimits()
        self._continue_on_error = continue_on_error

        self.lifecycle = RunLifecycle(self._limits, clock=clock)
        self.counter = JourneyCounter()
        self._stop_checker = StopConditionChecker(
            self._limits, self.lifecycle, self.counter
        )
        self._cancel_event = asyncio.Event()
        self._summary = RunSummary(mode=self._mode)

    @property
    def mode(self) -> SchedulingMode:
        return self._mode

    def cancel(self) -> None:
        """Stop the run. A pending boundary-policy sleep is interrupted immediately."""
        if not self.lifecycle.was_cancelled:
            self.info("Cancelling profile run")
        self.lifecycle.cancel()
        self._cancel_event.set()

    async def run(self) -> RunSummary:
        """Execute the plan until it ends, a limit is reached, or the run is cancelled.

        Raises:
            InvalidStateError: If the runner was already run.
            Exception: The first executor failure, unless continue_on_error is set.
        """
        if self.lifecycle.is_started:
            raise InvalidStateError("A ProfileRunner can only be run once")
        self.lifecycle.start()
        self.info(lambda: f"Starting {self._mode} profile run")

        try:
            if self._mode == SchedulingMode.SCHEDULED:
                await self._run_scheduled()
            else:
                await self._run_weighted()
        finally:
            self.lifecycle.mark_complete()
            self._summary.cancelled = self.lifecycle.was_cancelled
            self._summary.failed = self.counter.failed
            self._summary.elapsed_sec = self.lifecycle.elapsed_sec()

        self.info(
            lambda: f"Profile run finished: {self._summary.journeys_executed} journey(s) "
            f"in {self._summary.elapsed_sec:.3f}s"
            + (" (ended late)" if self._summary.ended_late else "")
            + (" (cancelled)" if self._summary.cancelled else "")
        )
        return self._summary

    def _can_start_journey(self) -> bool:
        if self._stop_checker.can_start_journey():
            return True
        reached = self._stop_checker.first_reached()
        if reached is not None and not self.lifecycle.was_cancelled:
            self._summary.limit_reached = True
            self.info(f"Stopping run: {type(reached).__name__} reached")
        return False

    async def _run_scheduled(self) -> None:
        plan: ScheduledPlan = self._plan
        started_at = plan.policy.now() if plan.policy is not None else None
        scheduled_run = plan.iter_due(
            self._cancel_event,
            started_at=started_at,
            should_continue=self._can_start_journey,
            time_left=self.lifecycle.time_left_in_seconds,
        )

        async with aclosing(aiter(scheduled_run)) as entries:
            async for entry in entries:
                await self._execute(entry.journey, entry)

        self._summary.ended_late = scheduled_run.ended_late
        self._summary.discarded = scheduled_run.discarded
        if scheduled_run.halted and not self.lifecycle.was_cancelled:
            self._summary.limit_reached = True

    async def _run_weighted(self) -> None:
        scheduler: WeightedScheduler = self._plan
        stream = scheduler.stream()
        while self._can_start_journey():
            draw = stream.next_draw()
            await self._execute(draw.journey, draw)
            # Let cancel() from other tasks land between journeys.
            await asyncio.sleep(0)

    async def _execute(self, journey: JourneyProtocol, step: JourneyStep) -> None:
        sequence = self.counter.increment_started()
        self._summary.executed.append(journey.display_name)
        self.debug(lambda: f"Journey {sequence}: {journey.display_name}")
        try:
            await self._executor(journey, step)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.counter.increment_failed()
            if not self._continue_on_error:
                raise
            self.exception(f"Journey {journey.display_name} failed: {e!r}")
        else:
            self.counter.increment_completed()
