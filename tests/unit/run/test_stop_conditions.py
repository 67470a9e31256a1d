# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for StopConditionChecker and individual stop conditions."""

from unittest.mock import MagicMock

import pytest

from journeyprofile.run.config import RunLimits
from journeyprofile.run.counter import JourneyCounter
from journeyprofile.run.lifecycle import RunLifecycle
from journeyprofile.run.stop_conditions import (
    DurationStopCondition,
    JourneyCountStopCondition,
    LifecycleStopCondition,
    StopConditionChecker,
)


def make_mock_lifecycle(
    was_cancelled: bool = False,
    is_complete: bool = False,
    time_left: float | None = 10.0,
) -> MagicMock:
    lifecycle = MagicMock(spec=RunLifecycle)
    lifecycle.was_cancelled = was_cancelled
    lifecycle.is_complete = is_complete
    lifecycle.time_left_in_seconds = MagicMock(return_value=time_left)
    return lifecycle


def make_mock_counter(started: int = 0) -> MagicMock:
    counter = MagicMock(spec=JourneyCounter)
    counter.started = started
    return counter


class TestShouldUse:
    @pytest.mark.parametrize(
        "limits,expected",
        [
            (RunLimits(), [LifecycleStopCondition]),
            (RunLimits(max_journeys=5), [LifecycleStopCondition, JourneyCountStopCondition]),
            (RunLimits(max_duration_sec=1.0), [LifecycleStopCondition, DurationStopCondition]),
            (
                RunLimits(max_journeys=5, max_duration_sec=1.0),
                [LifecycleStopCondition, JourneyCountStopCondition, DurationStopCondition],
            ),
        ],
    )
    def test_conditions_selected_from_limits(self, limits, expected):
        checker = StopConditionChecker(limits, make_mock_lifecycle(), make_mock_counter())
        assert [type(c) for c in checker.stop_conditions] == expected


class TestIndividualConditions:
    @pytest.mark.parametrize(
        "was_cancelled,is_complete,expected",
        [(False, False, True), (True, False, False), (False, True, False)],
    )
    def test_lifecycle(self, was_cancelled, is_complete, expected):
        condition = LifecycleStopCondition(
            RunLimits(),
            make_mock_lifecycle(was_cancelled=was_cancelled, is_complete=is_complete),
            make_mock_counter(),
        )
        assert condition.can_start_journey() is expected

    @pytest.mark.parametrize("started,expected", [(0, True), (2, True), (3, False), (4, False)])
    def test_journey_count(self, started, expected):
        condition = JourneyCountStopCondition(
            RunLimits(max_journeys=3), make_mock_lifecycle(), make_mock_counter(started)
        )
        assert condition.can_start_journey() is expected

    @pytest.mark.parametrize("time_left,expected", [(5.0, True), (0.0, False)])
    def test_duration(self, time_left, expected):
        condition = DurationStopCondition(
            RunLimits(max_duration_sec=10.0),
            make_mock_lifecycle(time_left=time_left),
            make_mock_counter(),
        )
        assert condition.can_start_journey() is expected


class TestStopConditionChecker:
    def test_all_conditions_must_pass(self):
        checker = StopConditionChecker(
            RunLimits(max_journeys=3, max_duration_sec=10.0),
            make_mock_lifecycle(time_left=0.0),
            make_mock_counter(started=1),
        )
        assert not checker.can_start_journey()
        assert isinstance(checker.first_reached(), DurationStopCondition)

    def test_first_reached_follows_check_order(self):
        checker = StopConditionChecker(
            RunLimits(max_journeys=1),
            make_mock_lifecycle(was_cancelled=True),
            make_mock_counter(started=1),
        )
        assert isinstance(checker.first_reached(), LifecycleStopCondition)

    def test_nothing_reached(self):
        checker = StopConditionChecker(
            RunLimits(max_journeys=3), make_mock_lifecycle(), make_mock_counter()
        )
        assert checker.can_start_journey()
        assert checker.first_reached() is None

    def test_zero_journey_limit_never_starts(self):
        checker = StopConditionChecker(
            RunLimits(max_journeys=0), make_mock_lifecycle(), make_mock_counter()
        )
        assert not checker.can_start_journey()
