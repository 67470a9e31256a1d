# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Run lifecycle state machine.

States: CREATED → STARTED → COMPLETE

Cancellation is a flag (can happen at any state), not a state itself.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from journeyprofile.common.enums import RunState
from journeyprofile.run.config import RunLimits


class RunLifecycle:
    """Explicit run state machine with timestamps.

    Timestamps come from the supplied monotonic clock (perf_counter by default),
    so they are only meaningful within one process.
    """

    def __init__(
        self, limits: RunLimits, clock: Callable[[], float] = time.perf_counter
    ) -> None:
        self._limits = limits
        self._clock = clock
        self.state: RunState = RunState.CREATED

        self.started_at: float | None = None
        self.completed_at: float | None = None

        # Cancellation flag (orthogonal to state)
        self.was_cancelled: bool = False

    def start(self) -> None:
        """Transition to STARTED state.

        Raises:
            ValueError: If already started (not in CREATED state).
        """
        if self.state != RunState.CREATED:
            raise ValueError("Run already started")
        self.state = RunState.STARTED
        self.started_at = self._clock()

    def mark_complete(self) -> None:
        """Transition to COMPLETE state.

        Raises:
            ValueError: If not started or already complete.
        """
        if self.state == RunState.CREATED:
            raise ValueError("Run not started. Call start() first.")
        if self.state == RunState.COMPLETE:
            raise ValueError("Run already completed")
        self.state = RunState.COMPLETE
        self.completed_at = self._clock()

    def cancel(self) -> None:
        """Mark run as cancelled. Can be called at any state."""
        self.was_cancelled = True

    def elapsed_sec(self) -> float:
        """Seconds since start, frozen at completion. 0.0 before start."""
        if self.started_at is None:
            return 0.0
        end = self.completed_at if self.completed_at is not None else self._clock()
        return end - self.started_at

    def time_left_in_seconds(self) -> float | None:
        """Remaining run time, or None if no duration limit is configured.

        Returns 0.0 once the duration has elapsed.
        """
        if self._limits.max_duration_sec is None:
            return None
        if self.started_at is None:
            return None  # Not started yet
        return max(0.0, self._limits.max_duration_sec - self.elapsed_sec())

    @property
    def is_started(self) -> bool:
        """True if run has started (in any state after CREATED)."""
        return self.state != RunState.CREATED

    @property
    def is_complete(self) -> bool:
        return self.state == RunState.COMPLETE
