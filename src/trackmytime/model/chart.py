# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

import pendulum


class ChartWindow(StrEnum):
    WEEK = "week"
    MONTH = "month"
    THREE_MONTHS = "three_months"
    ALL = "all"


class DayTotal(TypedDict):
    day: pendulum.Date
    total_seconds: float
