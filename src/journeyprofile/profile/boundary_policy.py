# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Boundary policies for executing scheduled plans.

Before each journey of a scheduled plan runs, elapsed run time is compared with
the journey's timestamp:

- early (elapsed < timestamp): apply ``IfEarly``. ``SLEEP`` blocks until the
  timestamp is reached, then runs the journey.
- late (elapsed > timestamp + tolerance): apply ``IfLate``. ``END`` terminates
  the run and discards the journey and everything after it.
- otherwise the journey runs immediately.

Elapsed time up to ``tolerance_sec`` past the timestamp still counts as on
time, so timer jitter after a sleep is not treated as late. There is no
tolerance on the early side: any journey reached before its timestamp waits.

A pending sleep is the only place the run blocks, and it waits on the run's
cancellation event so that a cancel interrupts it promptly. Weighted profiles
have no timestamps and never go through this module.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator, Callable
from typing import TYPE_CHECKING, NamedTuple

from journeyprofile.common.enums import BoundaryAction, IfEarly, IfLate
from journeyprofile.common.environment import Environment
from journeyprofile.common.exceptions import InvalidStateError
from journeyprofile.common.mixins import ProfileLoggerMixin
from journeyprofile.common.models import Scheduled

if TYPE_CHECKING:
    from journeyprofile.profile.plan import PlanEntry, ScheduledPlan


class BoundaryDecision(NamedTuple):
    """What to do with the next journey of a scheduled plan."""

    action: BoundaryAction
    delay_sec: float = 0.0
    """Seconds to wait before running the journey (SLEEP only)."""
    lateness_sec: float = 0.0
    """Seconds past the journey's timestamp (END only)."""


_PROCEED = BoundaryDecision(BoundaryAction.PROCEED)


class BoundaryPolicyEngine(ProfileLoggerMixin):
    """Applies a Scheduled policy to a plan as it executes.

    decide() is a pure function of elapsed time and due time. iter_due() drives a
    whole plan against the engine's clock.
    """

    def __init__(
        self,
        scheduled: Scheduled,
        *,
        clock: Callable[[], float] = time.perf_counter,
        tolerance_sec: float | None = None,
    ) -> None:
        """
        Args:
            scheduled: The profile's boundary policy.
            clock: Monotonic clock in seconds.
            tolerance_sec: Seconds past each timestamp that still count as on
                time. Defaults to Environment.SCHEDULING.ON_TIME_TOLERANCE_SEC.
        """
        super().__init__()
        self._scheduled = scheduled
        self._clock = clock
        self._tolerance_sec = (
            tolerance_sec
            if tolerance_sec is not None
            else Environment.SCHEDULING.ON_TIME_TOLERANCE_SEC
        )
        if self._tolerance_sec < 0:
            raise ValueError(f"tolerance_sec must be >= 0, got {self._tolerance_sec}")

    @property
    def scheduled(self) -> Scheduled:
        return self._scheduled

    @property
    def tolerance_sec(self) -> float:
        return self._tolerance_sec

    def now(self) -> float:
        return self._clock()

    def decide(self, elapsed_sec: float, due_sec: float) -> BoundaryDecision:
        """Decide what to do with a journey due at ``due_sec`` when ``elapsed_sec`` have passed."""
        if elapsed_sec < due_sec:
            return self._when_early(due_sec - elapsed_sec)
        if elapsed_sec > due_sec + self._tolerance_sec:
            return self._when_late(elapsed_sec - due_sec)
        return _PROCEED

    def _when_early(self, delay_sec: float) -> BoundaryDecision:
        match self._scheduled.if_early:
            case IfEarly.SLEEP:
                return BoundaryDecision(BoundaryAction.SLEEP, delay_sec=delay_sec)
            case _:
                raise InvalidStateError(
                    f"Unsupported if_early policy: {self._scheduled.if_early!r}"
                )

    def _when_late(self, lateness_sec: float) -> BoundaryDecision:
        match self._scheduled.if_late:
            case IfLate.END:
                return BoundaryDecision(BoundaryAction.END, lateness_sec=lateness_sec)
            case _:
                raise InvalidStateError(
                    f"Unsupported if_late policy: {self._scheduled.if_late!r}"
                )

    def iter_due(
        self,
        plan: ScheduledPlan,
        *,
        cancel_event: asyncio.Event | None = None,
        started_at: float | None = None,
        should_continue: Callable[[], bool] | None = None,
        time_left: Callable[[], float | None] | None = None,
    ) -> ScheduledRun:
        """Pace ``plan`` against this engine's clock.

        Args:
            plan: The plan to execute.
            cancel_event: Setting it interrupts a pending sleep and ends the run.
            started_at: Run start on the engine's clock. Defaults to the moment
                iteration begins.
            should_continue: Checked before each entry, ahead of any sleep.
                Returning False halts the run.
            time_left: Remaining run budget in seconds, or None for no budget.
                A sleep that would outlast it is cut short and the run halts.
        """
        return ScheduledRun(
            plan,
            self,
            cancel_event=cancel_event,
            started_at=started_at,
            should_continue=should_continue,
            time_left=time_left,
        )

    async def sleep(self, delay_sec: float, cancel_event: asyncio.Event | None) -> bool:
        """Sleep for ``delay_sec`` unless cancelled first.

        Returns:
            True if the full delay elapsed, False if cancel_event was set.
        """
        if cancel_event is None:
            await asyncio.sleep(delay_sec)
            return True
        if cancel_event.is_set():
            return False

        sleeper = asyncio.ensure_future(asyncio.sleep(delay_sec))
        waiter = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({sleeper, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (sleeper, waiter):
                if not task.done():
                    task.cancel()
            await asyncio.gather(sleeper, waiter, return_exceptions=True)
        return not cancel_event.is_set()

    def __repr__(self) -> str:
        return (
            f"BoundaryPolicyEngine(if_early={self._scheduled.if_early}, "
            f"if_late={self._scheduled.if_late}, tolerance_sec={self._tolerance_sec})"
        )


class ScheduledRun:
    """One pass over a scheduled plan, yielding each entry when it is due.

    Without an engine the entries are yielded back to back. After iteration the
    outcome flags tell why the run stopped.
    """

    def __init__(
        self,
        plan: ScheduledPlan,
        engine: BoundaryPolicyEngine | None,
        *,
        cancel_event: asyncio.Event | None = None,
        started_at: float | None = None,
        should_continue: Callable[[], bool] | None = None,
        time_left: Callable[[], float | None] | None = None,
    ) -> None:
        self._plan = plan
        self._engine = engine
        self._cancel_event = cancel_event
        self._started_at = started_at
        self._should_continue = should_continue
        self._time_left = time_left
        self._iterated = False

        self.yielded: int = 0
        self.ended_late: bool = False
        self.cancelled: bool = False
        self.halted: bool = False
        """should_continue returned False, or the time budget ran out mid-sleep."""
        self.discarded: int = 0
        """Number of plan entries that were never yielded."""

    def _stop(self, index: int, *, late: bool = False) -> None:
        self.discarded = len(self._plan) - index
        if late:
            self.ended_late = True
        else:
            self.cancelled = True

    def _halt(self, index: int) -> None:
        self.discarded = len(self._plan) - index
        self.halted = True

    def _is_cancelled(self) -> bool:
        return self._cancel_event is not None and self._cancel_event.is_set()

    def _sleep_budget(self, delay_sec: float) -> tuple[float, bool]:
        """Clamp ``delay_sec`` to the remaining time budget. The flag is True when clamped."""
        if self._time_left is None:
            return delay_sec, False
        remaining = self._time_left()
        if remaining is None or remaining >= delay_sec:
            return delay_sec, False
        return max(remaining, 0.0), True

    async def _run(self) -> AsyncIterator[PlanEntry]:
        engine = self._engine
        started_at = self._started_at
        if engine is not None and started_at is None:
            started_at = engine.now()

        for index, entry in enumerate(self._plan.entries):
            if self._is_cancelled():
                self._stop(index)
                return
            if self._should_continue is not None and not self._should_continue():
                self._halt(index)
                return

            if engine is not None:
                decision = engine.decide(engine.now() - started_at, entry.offset_sec)
                if decision.action == BoundaryAction.END:
                    engine.warning(
                        f"Run is {decision.lateness_sec:.3f}s late for {entry.display_name} "
                        f"at {entry.timestamp}; ending run and discarding "
                        f"{len(self._plan) - index} journey(s)"
                    )
                    self._stop(index, late=True)
                    return
                if decision.action == BoundaryAction.SLEEP:
                    delay_sec, clamped = self._sleep_budget(decision.delay_sec)
                    engine.debug(
                        lambda delay_sec=delay_sec, entry=entry: f"Early by "
                        f"{delay_sec:.3f}s, sleeping until {entry.timestamp}"
                    )
                    if not await engine.sleep(delay_sec, self._cancel_event):
                        engine.info("Run cancelled while waiting for the next journey")
                        self._stop(index)
                        return
                    if clamped:
                        engine.info(
                            lambda entry=entry: f"Time budget ran out before "
                            f"{entry.display_name} at {entry.timestamp}"
                        )
                        self._halt(index)
                        return

            self.yielded += 1
            yield entry

    def __aiter__(self) -> AsyncIterator[PlanEntry]:
        if self._iterated:
            raise InvalidStateError("A ScheduledRun can only be iterated once")
        self._iterated = True
        return self._run()
