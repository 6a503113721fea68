"""Subcommand modules for the hms CLI.

register_commands() defers imports so ``hms --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from hms.commands.build import build
    from hms.commands.format_cmd import format_cmd
    from hms.commands.parse import parse
    from hms.commands.time_of_day import time_of_day

    cli.add_command(format_cmd)
    cli.add_command(parse)
    cli.add_command(build)
    cli.add_command(time_of_day)
