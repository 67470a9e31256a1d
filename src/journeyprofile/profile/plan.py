# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Execution plan produced for scheduled profiles."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import overload

from journeyprofile.common.models import Scenario
from journeyprofile.profile.boundary_policy import BoundaryPolicyEngine, ScheduledRun
from journeyprofile.profile.duration_codec import format_timestamp
from journeyprofile.profile.journey_pool import JourneyProtocol


@dataclass(frozen=True, slots=True)
class PlanEntry:
    """A journey placed at an offset from run start."""

    offset_sec: int
    journey: JourneyProtocol
    scenario: Scenario

    @property
    def timestamp(self) -> str:
        """The offset in HH:MM:SS form."""
        return format_timestamp(self.offset_sec)

    @property
    def display_name(self) -> str:
        return self.journey.display_name


class ScheduledPlan(Sequence[JourneyProtocol]):
    """Time-ordered journeys of a scheduled profile.

    Behaves as an immutable sequence of journeys (the same journey may appear
    several times). The order is fixed when the plan is built. When the profile
    declares a Scheduled policy the plan carries a BoundaryPolicyEngine, and
    iter_due() paces the journeys against wall-clock time.
    """

    def __init__(
        self,
        entries: Iterable[PlanEntry],
        policy: BoundaryPolicyEngine | None = None,
    ) -> None:
        self._entries: tuple[PlanEntry, ...] = tuple(entries)
        self._policy = policy

    @property
    def entries(self) -> tuple[PlanEntry, ...]:
        return self._entries

    @property
    def policy(self) -> BoundaryPolicyEngine | None:
        """The boundary policy governing execution, if the profile declared one."""
        return self._policy

    @property
    def duration_sec(self) -> int:
        """Offset of the last journey, or 0 for an empty plan."""
        return self._entries[-1].offset_sec if self._entries else 0

    @property
    def display_names(self) -> list[str]:
        return [entry.display_name for entry in self._entries]

    @overload
    def __getitem__(self, index: int) -> JourneyProtocol: ...

    @overload
    def __getitem__(self, index: slice) -> list[JourneyProtocol]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [entry.journey for entry in self._entries[index]]
        return self._entries[index].journey

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        steps = ", ".join(f"{e.timestamp} {e.display_name}" for e in self._entries)
        return f"ScheduledPlan([{steps}], policy={self._policy!r})"

    def iter_due(
        self,
        cancel_event: asyncio.Event | None = None,
        started_at: float | None = None,
        *,
        should_continue: Callable[[], bool] | None = None,
        time_left: Callable[[], float | None] | None = None,
    ) -> ScheduledRun:
        """Start a run over this plan that yields each entry when it is due.

        With a policy, pacing follows the policy (see BoundaryPolicyEngine). Without
        one, entries are yielded back to back in plan order, stopping early if
        cancel_event is set or should_continue returns False.
        """
        if self._policy is not None:
            return self._policy.iter_due(
                self,
                cancel_event=cancel_event,
                started_at=started_at,
                should_continue=should_continue,
                time_left=time_left,
            )
        return ScheduledRun(
            self, None, cancel_event=cancel_event, should_continue=should_continue
        )
