# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for testing journeyprofile.

This file contains fixtures that are automatically discovered by pytest
and made available to test functions in the same directory and subdirectories.
"""

from collections.abc import Generator

import pytest

from journeyprofile.common import random_generator as rng
from journeyprofile.common.models import Configuration, Scenario, Scheduled
from journeyprofile.profile import Journey, JourneyPool

FLING_WEEK = "android.platform.test.scenario.calendar.FlingWeekPage"
FLING_DAY = "android.platform.test.scenario.calendar.FlingDayPage"
FLING_SCHEDULE = "android.platform.test.scenario.calendar.FlingSchedulePage"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_random_generator() -> Generator[None, None, None]:
    """Reset and seed the global random generator for each test.

    Every test starts from the same seed, and the state is cleaned up afterwards
    so that nothing leaks between tests.
    """
    rng.reset()
    rng.init(42)

    yield

    rng.reset()


@pytest.fixture
def calendar_pool() -> JourneyPool:
    """Pool with the three calendar journeys."""
    return JourneyPool(
        [Journey(FLING_WEEK), Journey(FLING_DAY), Journey(FLING_SCHEDULE)]
    )


@pytest.fixture
def scheduled_configuration() -> Configuration:
    """Scheduled profile declared out of timestamp order."""
    return Configuration(
        scheduled=Scheduled(if_early="sleep", if_late="end"),
        scenarios=(
            Scenario(journey=FLING_WEEK, at="00:01:00"),
            Scenario(journey=FLING_DAY, at="00:04:00"),
            Scenario(journey=FLING_WEEK, at="00:02:00"),
        ),
    )


@pytest.fixture
def weighted_configuration() -> Configuration:
    return Configuration(
        scenarios=(
            Scenario(journey=FLING_WEEK, weight=1.0),
            Scenario(journey=FLING_DAY, weight=3.0),
        )
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
