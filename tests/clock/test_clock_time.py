"""Tests for the clock helpers."""

import re
import time

from bench_inputs import clock


class TestDatetimeNow:
    """Test the log timestamp format."""

    def test_format(self):
        assert re.fullmatch(
            r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", clock.datetime_now()
        )

    def test_seconds_and_millis_come_from_one_reading(self, monkeypatch):
        # The second reading falls in the next second.
        readings = iter([1_700_000_000.9995, 1_700_000_001.0004])
        monkeypatch.setattr(clock, "time_sec", lambda: next(readings))

        stamp = clock.datetime_now()

        expected = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(1_700_000_000))
        assert stamp == expected + ".999"


class TestMonotonic:
    """Test the timing clock."""

    def test_never_decreases(self):
        first = clock.monotonic_ns()
        second = clock.monotonic_ns()
        assert isinstance(first, int)
        assert second >= first
