# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for RunLifecycle state machine."""

import pytest

from journeyprofile.common.enums import RunState
from journeyprofile.run.config import RunLimits
from journeyprofile.run.lifecycle import RunLifecycle


class TestRunLifecycleTransitions:
    def test_initial_state(self, fake_clock):
        lifecycle = RunLifecycle(RunLimits(), clock=fake_clock)
        assert lifecycle.state == RunState.CREATED
        assert lifecycle.started_at is None
        assert not lifecycle.is_started
        assert not lifecycle.was_cancelled

    def test_created_to_started_to_complete(self, fake_clock):
        lifecycle = RunLifecycle(RunLimits(), clock=fake_clock)
        lifecycle.start()
        assert lifecycle.state == RunState.STARTED
        assert lifecycle.started_at == fake_clock.now
        fake_clock.advance(5.0)
        lifecycle.mark_complete()
        assert lifecycle.is_complete
        assert lifecycle.completed_at == fake_clock.now

    def test_start_twice_raises(self, fake_clock):
        lifecycle = RunLifecycle(RunLimits(), clock=fake_clock)
        lifecycle.start()
        with pytest.raises(ValueError, match="already started"):
            lifecycle.start()

    def test_complete_before_start_raises(self, fake_clock):
        with pytest.raises(ValueError, match="not started"):
            RunLifecycle(RunLimits(), clock=fake_clock).mark_complete()

    def test_complete_twice_raises(self, fake_clock):
        lifecycle = RunLifecycle(RunLimits(), clock=fake_clock)
        lifecycle.start()
        lifecycle.mark_complete()
        with pytest.raises(ValueError, match="already completed"):
            lifecycle.mark_complete()

    @pytest.mark.parametrize("started", [False, True])
    def test_cancel_in_any_state(self, fake_clock, started):
        lifecycle = RunLifecycle(RunLimits(), clock=fake_clock)
        if started:
            lifecycle.start()
        lifecycle.cancel()
        assert lifecycle.was_cancelled


class TestRunLifecycleTiming:
    def test_elapsed_freezes_at_completion(self, fake_clock):
        lifecycle = RunLifecycle(RunLimits(), clock=fake_clock)
        assert lifecycle.elapsed_sec() == 0.0
        lifecycle.start()
        fake_clock.advance(3.0)
        assert lifecycle.elapsed_sec() == 3.0
        lifecycle.mark_complete()
        fake_clock.advance(10.0)
        assert lifecycle.elapsed_sec() == 3.0

    def test_time_left_without_limit(self, fake_clock):
        lifecycle = RunLifecycle(RunLimits(), clock=fake_clock)
        lifecycle.start()
        assert lifecycle.time_left_in_seconds() is None

    def test_time_left_counts_down_to_zero(self, fake_clock):
        lifecycle = RunLifecycle(RunLimits(max_duration_sec=10.0), clock=fake_clock)
        assert lifecycle.time_left_in_seconds() is None
        lifecycle.start()
        fake_clock.advance(4.0)
        assert lifecycle.time_left_in_seconds() == 6.0
        fake_clock.advance(20.0)
        assert lifecycle.time_left_in_seconds() == 0.0
