# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from trackmytime.repository.configuration import CONFIGURATION_REPO
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.service.activity import ACTIVITY_MANAGER, ConsoleLiveActivity
from trackmytime.terminal import configuration, entry, project, tag
from trackmytime.terminal.custom_typer import OrderedAliasedTyperGroup
from trackmytime.terminal.export import export
from trackmytime.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="trackmytime - Personal time tracking in the CLI",
    no_args_is_help=True,
)
app.add_typer(entry.app, name="entry, e", help="start, stop and edit entries")
app.add_typer(project.app, name="project, p", help="manage projects and charts")
app.add_typer(tag.app, name="tag, t", help="manage tags")
app.add_typer(configuration.app, name="config, c", help="view and change settings")
app.command(name="export, x")(export)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    trackmytime - Personal time tracking in the CLI

    Global options that apply to all commands.
    """
    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"] and not no_header)

    # Indicators for entries that were already running belong to earlier runs
    ACTIVITY_MANAGER.set_enabled(config["live_activity"])
    if ACTIVITY_MANAGER.sink is None:
        ACTIVITY_MANAGER.set_sink(ConsoleLiveActivity())
    ACTIVITY_MANAGER.adopt(ENTRY_REPO.get_all_entries())


def run() -> None:
    app()
