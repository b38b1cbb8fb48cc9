# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from trackmytime import configuration
from trackmytime.model.chart import ChartWindow
from trackmytime.repository.configuration import CONFIGURATION_REPO
from trackmytime.terminal.completion import complete_window
from trackmytime.terminal.custom_typer import AliasedTyperGroup
from trackmytime.terminal.util import abort

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def __enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("show_header", __enabled(config["show_header"]))
    table.add_row("newest_first", __enabled(config["newest_first"]))
    table.add_row("chart_window", config["chart_window"])
    table.add_row("live_activity", __enabled(config["live_activity"]))
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="takes effect on the next run"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="use the default data path")
    ] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    newest_first: Annotated[
        Optional[bool], typer.Option("--newest-first/--oldest-first")
    ] = None,
    chart_window: Annotated[
        Optional[ChartWindow],
        typer.Option("--chart-window", autocompletion=complete_window),
    ] = None,
    live_activity: Annotated[
        Optional[bool], typer.Option("--live-activity/--no-live-activity")
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        abort(f"log level must be one of {', '.join(LOG_LEVELS)}")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        newest_first=newest_first,
        chart_window=chart_window.value if chart_window is not None else None,
        live_activity=live_activity,
        log_level=log_level.upper() if log_level is not None else None,
    )
    CONFIGURATION_REPO.flush()
    logging.getLogger(__name__).info("configuration updated")

    view()
