# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from journeyprofile.common.exceptions import InvalidStateError
from journeyprofile.common.models import Configuration, Scenario, Scheduled
from journeyprofile.profile.boundary_policy import BoundaryPolicyEngine
from journeyprofile.profile.deterministic import DeterministicScheduler
from journeyprofile.profile.journey_pool import JourneyPool

WEEK = "android.platform.test.scenario.calendar.FlingWeekPage"
DAY = "android.platform.test.scenario.calendar.FlingDayPage"


class TestDeterministicScheduler:
    def test_orders_by_timestamp(self, scheduled_configuration, calendar_pool):
        plan = DeterministicScheduler(
            scheduled_configuration, calendar_pool
        ).build_plan()
        assert plan.display_names == [WEEK, WEEK, DAY]
        assert [entry.offset_sec for entry in plan.entries] == [60, 120, 240]
        assert [entry.timestamp for entry in plan.entries] == [
            "00:01:00",
            "00:02:00",
            "00:04:00",
        ]

    def test_plan_is_a_sequence_of_pool_journeys(
        self, scheduled_configuration, calendar_pool
    ):
        plan = DeterministicScheduler(
            scheduled_configuration, calendar_pool
        ).build_plan()
        assert len(plan) == 3
        assert plan[0] is calendar_pool[WEEK]
        assert plan[-1] is calendar_pool[DAY]
        assert plan[1:] == [calendar_pool[WEEK], calendar_pool[DAY]]
        assert list(plan) == [calendar_pool[WEEK], calendar_pool[WEEK], calendar_pool[DAY]]

    def test_equal_timestamps_keep_declaration_order(self):
        pool = JourneyPool.from_names(["A", "B", "C", "D"])
        configuration = Configuration(
            scheduled=Scheduled(),
            scenarios=(
                Scenario(journey="C", at="00:00:10"),
                Scenario(journey="A", at="00:00:05"),
                Scenario(journey="B", at="00:00:10"),
                Scenario(journey="D", at="00:00:05"),
                Scenario(journey="A", at="00:00:10"),
            ),
        )
        plan = DeterministicScheduler(configuration, pool).build_plan()
        assert plan.display_names == ["A", "D", "C", "B", "A"]

    def test_same_input_same_plan(self, scheduled_configuration, calendar_pool):
        scheduler = DeterministicScheduler(scheduled_configuration, calendar_pool)
        assert scheduler.build_plan().display_names == scheduler.build_plan().display_names

    def test_entries_keep_their_scenario(self, calendar_pool):
        configuration = Configuration(
            scheduled=Scheduled(),
            scenarios=(
                Scenario(journey=WEEK, at="00:00:01", extras={"iterations": "3"}),
            ),
        )
        plan = DeterministicScheduler(configuration, calendar_pool).build_plan()
        assert plan.entries[0].scenario.extras == {"iterations": "3"}

    def test_attaches_policy(self, scheduled_configuration, calendar_pool):
        policy = BoundaryPolicyEngine(scheduled_configuration.scheduled)
        plan = DeterministicScheduler(
            scheduled_configuration, calendar_pool
        ).build_plan(policy=policy)
        assert plan.policy is policy
        assert plan.duration_sec == 240

    def test_requires_timestamps(self, calendar_pool):
        configuration = Configuration(scenarios=(Scenario(journey=WEEK, weight=1),))
        with pytest.raises(InvalidStateError, match="has no timestamp"):
            DeterministicScheduler(configuration, calendar_pool).build_plan()
