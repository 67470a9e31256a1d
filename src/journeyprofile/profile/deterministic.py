# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Timestamp-ordered scheduling for scheduled profiles."""

from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING

from journeyprofile.common.exceptions import InvalidStateError
from journeyprofile.common.mixins import ProfileLoggerMixin
from journeyprofile.common.models import Configuration
from journeyprofile.profile.duration_codec import parse_timestamp
from journeyprofile.profile.journey_pool import JourneyPool
from journeyprofile.profile.plan import PlanEntry, ScheduledPlan

if TYPE_CHECKING:
    from journeyprofile.profile.boundary_policy import BoundaryPolicyEngine


class DeterministicScheduler(ProfileLoggerMixin):
    """Orders the scenarios of a validated, fully timestamped configuration.

    Journeys are sorted by ascending timestamp. Scenarios sharing a timestamp keep
    their declaration order, so identical inputs always produce identical plans.
    The plan does not react to wall-clock progress; that is the boundary policy's job.
    """

    def __init__(self, configuration: Configuration, pool: JourneyPool) -> None:
        super().__init__()
        self._configuration = configuration
        self._pool = pool

    def build_plan(self, policy: BoundaryPolicyEngine | None = None) -> ScheduledPlan:
        """Build the time-ordered plan.

        Args:
            policy: Boundary policy to attach to the plan, if any.

        Raises:
            InvalidStateError: If a scenario has no timestamp, i.e. the configuration
                was not validated first.
        """
        entries: list[PlanEntry] = []
        for index, scenario in enumerate(self._configuration.scenarios):
            if not scenario.has_timestamp:
                raise InvalidStateError(
                    f"Scenario #{index} ({scenario.journey}) has no timestamp; "
                    "validate the configuration before scheduling"
                )
            entries.append(
                PlanEntry(
                    offset_sec=parse_timestamp(scenario.at),
                    journey=self._pool[scenario.journey],
                    scenario=scenario,
                )
            )

        # list.sort is stable: equal timestamps keep declaration order
        entries.sort(key=attrgetter("offset_sec"))

        plan = ScheduledPlan(entries, policy=policy)
        self.info(
            lambda: f"Built scheduled plan with {len(plan)} journey(s) spanning "
            f"{plan.entries[-1].timestamp if plan.entries else '00:00:00'}"
        )
        self.debug(lambda: f"Plan order: {plan.display_names}")
        return plan
