"""Tests for per-day duration aggregation behind the project charts."""

from copy import deepcopy

import pendulum
import pytest

from trackmytime.model.chart import ChartWindow
from trackmytime.service.chart import (
    aggregate_durations,
    get_day_slots,
    resolve_window,
    total_seconds,
)
from trackmytime.time import seconds_between

NOW = pendulum.datetime(2024, 6, 10, 12, tz="UTC")


def days(day_totals):
    return [day_total["day"] for day_total in day_totals]


def by_day(day_totals):
    return {day_total["day"]: day_total["total_seconds"] for day_total in day_totals}


class TestWindowResolution:
    def test_week_starts_six_days_back_at_midnight(self):
        start, end = resolve_window(ChartWindow.WEEK, NOW, [], tz="UTC")
        assert start == pendulum.datetime(2024, 6, 4, tz="UTC")
        assert end == NOW

    def test_month_uses_calendar_months(self):
        now = pendulum.datetime(2024, 3, 31, 12, tz="UTC")
        start, _ = resolve_window(ChartWindow.MONTH, now, [], tz="UTC")
        assert start == pendulum.datetime(2024, 2, 29, tz="UTC")

    def test_three_months(self):
        start, _ = resolve_window(ChartWindow.THREE_MONTHS, NOW, [], tz="UTC")
        assert start == pendulum.datetime(2024, 3, 10, tz="UTC")

    def test_all_starts_at_earliest_entry(self, make_entry, at):
        entries = [
            make_entry(at(2024, 3, 1, 8), at(2024, 3, 1, 9)),
            make_entry(at(2024, 1, 1, 15), at(2024, 1, 1, 16)),
        ]
        start, _ = resolve_window(ChartWindow.ALL, NOW, entries, tz="UTC")
        assert start == pendulum.datetime(2024, 1, 1, tz="UTC")

    def test_all_without_entries_starts_today(self):
        start, _ = resolve_window(ChartWindow.ALL, NOW, [], tz="UTC")
        assert start == pendulum.datetime(2024, 6, 10, tz="UTC")


class TestBucketCoverage:
    def test_empty_week_has_seven_zero_days(self):
        result = aggregate_durations([], ChartWindow.WEEK, NOW, tz="UTC")

        assert days(result) == [pendulum.date(2024, 6, d) for d in range(4, 11)]
        assert all(day_total["total_seconds"] == 0 for day_total in result)

    def test_all_window_spans_first_entry_to_now(self, make_entry, at):
        now = at(2024, 3, 5, 12)
        entries = [
            make_entry(at(2024, 1, 1, 9), at(2024, 1, 1, 10)),
            make_entry(at(2024, 3, 1, 9), at(2024, 3, 1, 10)),
        ]

        result = aggregate_durations(entries, ChartWindow.ALL, now, tz="UTC")

        assert days(result)[0] == pendulum.date(2024, 1, 1)
        assert days(result)[-1] == pendulum.date(2024, 3, 5)
        assert len(result) == 31 + 29 + 5

    def test_all_without_entries_is_single_zero_day(self):
        result = aggregate_durations([], ChartWindow.ALL, NOW, tz="UTC")
        assert result == [{"day": pendulum.date(2024, 6, 10), "total_seconds": 0.0}]

    @pytest.mark.parametrize(
        "window", [ChartWindow.WEEK, ChartWindow.MONTH, ChartWindow.THREE_MONTHS]
    )
    def test_days_are_contiguous_without_duplicates(self, window):
        result = days(aggregate_durations([], window, NOW, tz="UTC"))

        assert len(set(result)) == len(result)
        for previous, current in zip(result, result[1:]):
            assert current == previous.add(days=1)
        assert result[-1] == pendulum.date(2024, 6, 10)

    def test_three_month_window_length(self):
        result = aggregate_durations([], ChartWindow.THREE_MONTHS, NOW, tz="UTC")
        assert len(result) == 22 + 30 + 31 + 10

    def test_now_at_midnight_still_has_today(self):
        now = pendulum.datetime(2024, 6, 10, tz="UTC")
        result = aggregate_durations([], ChartWindow.WEEK, now, tz="UTC")
        assert len(result) == 7
        assert days(result)[-1] == pendulum.date(2024, 6, 10)

    def test_day_slots_follow_local_midnights(self):
        slots = get_day_slots(
            pendulum.datetime(2024, 3, 30, 15, tz="Europe/Zurich"),
            pendulum.datetime(2024, 4, 1, 9, tz="Europe/Zurich"),
            tz="Europe/Zurich",
        )
        lengths = [seconds_between(start, end) / 3600 for start, end in slots]
        assert lengths == [24, 23, 24]

    def test_days_after_a_skipped_midnight_start_at_midnight(self):
        # Clocks jump from 00:00 to 01:00 on 2024-09-08 in Santiago
        santiago = "America/Santiago"
        slots = get_day_slots(
            pendulum.datetime(2024, 9, 7, 12, tz=santiago),
            pendulum.datetime(2024, 9, 10, 12, tz=santiago),
            tz=santiago,
        )

        lengths = [seconds_between(start, end) / 3600 for start, end in slots]
        assert lengths == [24, 23, 24, 24]
        assert [start.in_tz(santiago).hour for start, _ in slots[2:]] == [0, 0]
        for (_, previous_end), (next_start, _) in zip(slots, slots[1:]):
            assert previous_end == next_start


class TestCrediting:
    def test_entry_across_midnight_is_split(self, make_entry, at):
        entry = make_entry(at(2024, 6, 8, 23), at(2024, 6, 9, 1))

        result = by_day(aggregate_durations([entry], ChartWindow.WEEK, NOW, tz="UTC"))

        assert result[pendulum.date(2024, 6, 8)] == 3600
        assert result[pendulum.date(2024, 6, 9)] == 3600
        assert sum(result.values()) == 7200

    def test_multi_day_entry_conserves_seconds(self, make_entry, at):
        entry = make_entry(at(2024, 6, 5, 18), at(2024, 6, 8, 6))

        result = aggregate_durations([entry], ChartWindow.WEEK, NOW, tz="UTC")
        totals = by_day(result)

        assert totals[pendulum.date(2024, 6, 5)] == 6 * 3600
        assert totals[pendulum.date(2024, 6, 6)] == 24 * 3600
        assert totals[pendulum.date(2024, 6, 7)] == 24 * 3600
        assert totals[pendulum.date(2024, 6, 8)] == 6 * 3600
        assert total_seconds(result) == 60 * 3600

    def test_running_entry_counts_up_to_now(self, make_entry, at):
        entry = make_entry(at(2024, 6, 10, 10), None)

        result = by_day(aggregate_durations([entry], ChartWindow.WEEK, NOW, tz="UTC"))

        assert result[pendulum.date(2024, 6, 10)] == 7200

    def test_end_after_now_is_clipped(self, make_entry, at):
        entry = make_entry(at(2024, 6, 10, 11), at(2024, 6, 10, 15))

        result = by_day(aggregate_durations([entry], ChartWindow.WEEK, NOW, tz="UTC"))

        assert result[pendulum.date(2024, 6, 10)] == 3600

    def test_entry_straddling_window_start_is_clipped(self, make_entry, at):
        entry = make_entry(at(2024, 6, 3, 22), at(2024, 6, 4, 2))

        result = aggregate_durations([entry], ChartWindow.WEEK, NOW, tz="UTC")

        assert by_day(result)[pendulum.date(2024, 6, 4)] == 7200
        assert pendulum.date(2024, 6, 3) not in by_day(result)
        assert total_seconds(result) == 7200

    def test_entries_outside_window_are_ignored(self, make_entry, at):
        before = make_entry(at(2024, 5, 1, 9), at(2024, 5, 1, 17))
        after_now = make_entry(at(2024, 6, 10, 13), at(2024, 6, 10, 14))

        result = aggregate_durations([before, after_now], ChartWindow.WEEK, NOW, tz="UTC")

        assert total_seconds(result) == 0

    def test_end_before_start_never_goes_negative(self, make_entry, at):
        malformed = make_entry(at(2024, 6, 9, 10), at(2024, 6, 9, 9))
        valid = make_entry(at(2024, 6, 9, 12), at(2024, 6, 9, 13))

        result = aggregate_durations([malformed, valid], ChartWindow.WEEK, NOW, tz="UTC")

        assert all(day_total["total_seconds"] >= 0 for day_total in result)
        assert by_day(result)[pendulum.date(2024, 6, 9)] == 3600

    def test_overlapping_entries_add_up(self, make_entry, at):
        entries = [
            make_entry(at(2024, 6, 9, 9), at(2024, 6, 9, 11)),
            make_entry(at(2024, 6, 9, 10), at(2024, 6, 9, 12)),
        ]

        result = by_day(aggregate_durations(entries, ChartWindow.WEEK, NOW, tz="UTC"))

        assert result[pendulum.date(2024, 6, 9)] == 4 * 3600

    def test_fractional_seconds_are_kept(self, make_entry, at):
        entry = make_entry(
            at(2024, 6, 9, 9),
            pendulum.datetime(2024, 6, 9, 9, 0, 1, 500000, tz="UTC"),
        )

        result = by_day(aggregate_durations([entry], ChartWindow.WEEK, NOW, tz="UTC"))

        assert result[pendulum.date(2024, 6, 9)] == pytest.approx(1.5)

    def test_dst_day_is_twenty_three_hours(self, make_entry):
        zurich = "Europe/Zurich"
        entry = make_entry(
            pendulum.datetime(2024, 3, 31, tz=zurich),
            pendulum.datetime(2024, 4, 1, tz=zurich),
        )
        now = pendulum.datetime(2024, 4, 1, 12, tz=zurich)

        result = by_day(aggregate_durations([entry], ChartWindow.WEEK, now, tz=zurich))

        assert result[pendulum.date(2024, 3, 31)] == 23 * 3600
        assert result[pendulum.date(2024, 4, 1)] == 0

    def test_entry_after_skipped_midnight_lands_on_its_own_day(self, make_entry):
        santiago = "America/Santiago"
        entry_start = pendulum.datetime(2024, 9, 10, 0, 15, tz=santiago)
        entry = make_entry(entry_start, entry_start.add(minutes=30))
        now = pendulum.datetime(2024, 9, 12, 12, tz=santiago)

        result = by_day(
            aggregate_durations([entry], ChartWindow.WEEK, now, tz=santiago)
        )

        assert result[pendulum.date(2024, 9, 10)] == 1800
        assert result[pendulum.date(2024, 9, 9)] == 0

    def test_input_is_not_modified(self, make_entry, at):
        entries = [make_entry(at(2024, 6, 9, 9), None)]
        snapshot = deepcopy(entries)

        aggregate_durations(entries, ChartWindow.ALL, NOW, tz="UTC")

        assert entries == snapshot


class TestTotalSeconds:
    def test_sums_all_days(self):
        day_totals = [
            {"day": pendulum.date(2024, 6, 9), "total_seconds": 1.5},
            {"day": pendulum.date(2024, 6, 10), "total_seconds": 3600.0},
        ]
        assert total_seconds(day_totals) == 3601.5

    def test_empty_series(self):
        assert total_seconds([]) == 0
