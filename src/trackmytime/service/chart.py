# SPDX-License-Identifier: MIT

from typing import Sequence

import pendulum

from trackmytime.model.chart import ChartWindow, DayTotal
from trackmytime.model.entry import Entry
from trackmytime.time import TimezoneLike, seconds_between, start_of_day


def resolve_window(
    window: ChartWindow,
    now: pendulum.DateTime,
    entries: Sequence[Entry],
    tz: TimezoneLike = "local",
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Get the start and end of a chart window.

    Args:
        window: The selected window
        now: The reference instant, which is always the window end
        entries: Only consulted for ChartWindow.ALL
        tz: Timezone whose calendar defines the start of a day

    Returns:
        Tuple of (start, end). The start is a local midnight.
    """
    local_now = now.in_tz(tz)

    if window == ChartWindow.WEEK:
        start = start_of_day(local_now.subtract(days=6), tz)
    elif window == ChartWindow.MONTH:
        start = start_of_day(local_now.subtract(months=1), tz)
    elif window == ChartWindow.THREE_MONTHS:
        start = start_of_day(local_now.subtract(months=3), tz)
    else:  # window == ChartWindow.ALL
        if len(entries) > 0:
            earliest = min(entry["start"] for entry in entries)
            start = start_of_day(earliest, tz)
        else:
            start = start_of_day(local_now, tz)

    return start, now


def get_day_slots(
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    tz: TimezoneLike = "local",
) -> list[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """
    Contiguous local-day spans covering start-of-day(start) through start-of-day(end).

    Each slot is [midnight, next midnight), so DST transition days are 23 or 25
    hours long. A window ending before it starts still yields its first day.
    """
    slot_start = start_of_day(start, tz)
    last_slot_start = start_of_day(end, tz)

    slots: list[tuple[pendulum.DateTime, pendulum.DateTime]] = []
    while True:
        # Re-anchor on midnight; where midnight is skipped the day starts later
        slot_end = start_of_day(slot_start.add(days=1), tz)
        slots.append((slot_start, slot_end))
        if slot_start >= last_slot_start:
            break
        slot_start = slot_end
    return slots


def aggregate_durations(
    entries: Sequence[Entry],
    window: ChartWindow,
    now: pendulum.DateTime,
    tz: TimezoneLike = "local",
) -> list[DayTotal]:
    """
    Total tracked seconds per calendar day across a chart window.

    Entries are clipped to the window and split at local midnights, so an
    entry spanning several days credits each day with its own share. A
    running entry counts up to `now`. Overlaps are clamped at zero, which
    keeps entries whose end precedes their start from subtracting time.

    Args:
        entries: Entries to aggregate, usually already scoped to one project
        window: The selected window
        now: The reference instant
        tz: Timezone whose calendar defines day boundaries

    Returns:
        One DayTotal per day of the window, ascending, with no gaps.
    """
    window_start, window_end = resolve_window(window, now, entries, tz)
    slots = get_day_slots(window_start, window_end, tz)
    totals: list[float] = [0.0] * len(slots)

    for entry in entries:
        entry_start = entry["start"]
        entry_end = entry["end"] if entry["end"] is not None else now

        # No overlap with the window
        if entry_end < window_start or entry_start > window_end:
            continue

        clipped_start = max(entry_start, window_start)
        clipped_end = min(entry_end, window_end)
        if clipped_end <= clipped_start:
            continue

        for index, (slot_start, slot_end) in enumerate(slots):
            if slot_end <= clipped_start:
                continue
            if slot_start >= clipped_end:
                break
            overlap = seconds_between(
                max(clipped_start, slot_start), min(clipped_end, slot_end)
            )
            totals[index] += max(0.0, overlap)

    return [
        {"day": slot_start.date(), "total_seconds": total}
        for (slot_start, _), total in zip(slots, totals)
    ]


def total_seconds(day_totals: Sequence[DayTotal]) -> float:
    return sum(day_total["total_seconds"] for day_total in day_totals)
