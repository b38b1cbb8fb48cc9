"""Tests for time helpers."""

import pendulum
import pytest

from trackmytime.time import (
    datetime_from_str,
    datetime_to_iso_str,
    format_duration,
    seconds_between,
    start_of_day,
)


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "0h 00m 00s"),
            (3783, "1h 03m 03s"),
            (3903, "1h 05m 03s"),
            (59.9, "0h 00m 59s"),
            (36 * 3600 + 61, "36h 01m 01s"),
            (-5, "0h 00m 00s"),
        ],
    )
    def test_formats(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_none_is_blank(self):
        assert format_duration(None) == ""


class TestStartOfDay:
    def test_utc(self):
        value = pendulum.datetime(2024, 6, 10, 15, 30, tz="UTC")
        assert start_of_day(value, "UTC") == pendulum.datetime(2024, 6, 10, tz="UTC")

    def test_uses_the_given_calendar(self):
        # 23:30 UTC is already the next day in Zurich
        value = pendulum.datetime(2024, 6, 10, 23, 30, tz="UTC")
        result = start_of_day(value, "Europe/Zurich")
        assert result == pendulum.datetime(2024, 6, 11, tz="Europe/Zurich")


class TestSecondsBetween:
    def test_signed(self):
        start = pendulum.datetime(2024, 6, 10, 9, tz="UTC")
        end = pendulum.datetime(2024, 6, 10, 10, tz="UTC")
        assert seconds_between(start, end) == 3600
        assert seconds_between(end, start) == -3600

    def test_across_timezones(self):
        start = pendulum.datetime(2024, 6, 10, 9, tz="UTC")
        end = pendulum.datetime(2024, 6, 10, 12, tz="Europe/Zurich")
        assert seconds_between(start, end) == 3600


class TestIsoRoundTrip:
    def test_keeps_instant(self):
        value = pendulum.datetime(2024, 6, 10, 9, 15, 2, tz="UTC")
        assert datetime_from_str(datetime_to_iso_str(value)) == value
