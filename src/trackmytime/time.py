# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias, cast

import pendulum

TimezoneLike: TypeAlias = str | pendulum.Timezone | pendulum.FixedTimezone


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("MMM-DD ddd")


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    """Parse a wall-clock string in local time and return it in UTC."""
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
    return pendulum_date_time.in_tz("UTC")


def start_of_day(
    datetime: pendulum.DateTime, tz: TimezoneLike = "local"
) -> pendulum.DateTime:
    """Midnight of the calendar day containing `datetime`, as seen in `tz`."""
    return datetime.in_tz(tz).start_of("day")


def seconds_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    """Signed seconds from `start` to `end`; negative when `end` precedes `start`."""
    return end.timestamp() - start.timestamp()


def format_duration(seconds: Optional[float]) -> str:
    """Render seconds as "1h 05m 03s". Fractions are truncated, negatives read as zero."""
    if seconds is None:
        return ""
    whole_seconds = max(0, int(seconds))
    hours = whole_seconds // 3600
    minutes = (whole_seconds % 3600) // 60
    remaining_seconds = whole_seconds % 60
    return f"{hours}h {minutes:02d}m {remaining_seconds:02d}s"
