# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

ALIAS_SEPARATOR = re.compile(r"\s*,\s*")


def command_aliases(registered_name: str) -> list[str]:
    """Split a registered name such as "entry, e" into its words."""
    return [alias for alias in ALIAS_SEPARATOR.split(registered_name) if alias != ""]


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered as "name, alias, ..." and can be
    invoked by any of those words.
    """

    def resolve_alias(self, word: str) -> str:
        for registered_name in self.commands:
            if word in command_aliases(registered_name):
                return registered_name
        return word

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        registered_name = name if name is not None else cmd.name
        # An alias of an existing command must not shadow it
        resolved = self.resolve_alias(registered_name or "")
        if resolved != registered_name and resolved in self.commands:
            return
        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Top-level group: help lists entries first, settings last."""

    command_order = [
        "entry, e",
        "project, p",
        "tag, t",
        "export, x",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.command_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
