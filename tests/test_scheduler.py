"""Tests for the tick scheduler."""

import pytest

from timed_snake.scheduler import TickScheduler


class TestTickScheduler:
    def test_defaults(self):
        scheduler = TickScheduler()
        assert scheduler.interval == 0.1
        assert scheduler.last_tick == 0.0

    def test_invalid_interval(self):
        with pytest.raises(ValueError, match="positive"):
            TickScheduler(interval=0)

    def test_not_due_before_interval(self):
        scheduler = TickScheduler(0.1, now=1.0)
        assert not scheduler.poll(1.05)
        assert scheduler.last_tick == 1.0

    def test_due_at_interval(self):
        scheduler = TickScheduler(0.1, now=1.0)
        assert scheduler.poll(1.1)
        assert scheduler.last_tick == 1.1

    def test_reference_moves_on_tick(self):
        scheduler = TickScheduler(0.1, now=0.0)
        assert scheduler.poll(0.5)
        assert not scheduler.poll(0.55)
        assert scheduler.poll(0.6)

    def test_accumulated_timestamps(self):
        scheduler = TickScheduler(0.1, now=0.0)
        now = 0.0
        for _ in range(50):
            now += 0.1
            assert scheduler.poll(now)

    def test_due_does_not_mutate(self):
        scheduler = TickScheduler(0.1, now=0.0)
        assert scheduler.due(0.2)
        assert scheduler.last_tick == 0.0

    def test_reset(self):
        scheduler = TickScheduler(0.1, now=0.0)
        scheduler.reset(3.0)
        assert not scheduler.poll(3.05)
        assert scheduler.poll(3.1)
