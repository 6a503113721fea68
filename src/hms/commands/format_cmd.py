"""Command: format seconds counts as H:MM:SS."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hms.commands._base import HmsCommand

if TYPE_CHECKING:
    from hms.commands._context import AppContext


@click.command(
    "format",
    cls=HmsCommand,
    examples="""\
  hms format 45026
  hms format -- -45026 90000 NA
  hms format 0.25 3661.5
  hms --json format 45026""",
)
@click.argument("seconds", nargs=-1, required=True)
@click.pass_obj
def format_cmd(app: AppContext, seconds: tuple[str, ...]) -> None:
    """Format SECONDS (use NA for missing) as time of day."""
    app.emit(app.service.format_seconds(list(seconds)))
