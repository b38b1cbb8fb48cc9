# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from trackmytime.model.chart import ChartWindow, DayTotal
from trackmytime.service.chart import total_seconds
from trackmytime.time import date_to_display_str, format_duration

BAR_WIDTH = 40
BAR_CHARACTER = "█"

WINDOW_LABELS = {
    ChartWindow.WEEK: "last 7 days",
    ChartWindow.MONTH: "last month",
    ChartWindow.THREE_MONTHS: "last 3 months",
    ChartWindow.ALL: "all time",
}


def render_bar(seconds: float, max_seconds: float, width: int = BAR_WIDTH) -> str:
    if max_seconds <= 0 or seconds <= 0:
        return ""
    # Any tracked time shows at least one block
    return BAR_CHARACTER * max(1, round(width * seconds / max_seconds))


def duration_chart(
    day_totals: list[DayTotal],
    window: ChartWindow,
    color: str = "dark_orange",
) -> None:
    console = Console()
    console.print(
        f" [bold]{WINDOW_LABELS[window]}[/bold]: "
        f"{format_duration(total_seconds(day_totals))}"
    )

    chart_table = Table(box=box.SIMPLE, show_header=False)
    chart_table.add_column("day")
    chart_table.add_column("bar")
    chart_table.add_column("total", justify="right")

    max_seconds = max((d["total_seconds"] for d in day_totals), default=0.0)
    for day_total in day_totals:
        chart_table.add_row(
            date_to_display_str(day_total["day"]),
            f"[{color}]{render_bar(day_total['total_seconds'], max_seconds)}[/]",
            format_duration(day_total["total_seconds"]),
        )

    console.print(chart_table)
