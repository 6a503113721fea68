"""Command: extract the time of day from timestamps."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hms.commands._base import HmsCommand

if TYPE_CHECKING:
    from hms.commands._context import AppContext


@click.command(
    "time-of-day",
    cls=HmsCommand,
    examples="""\
  hms time-of-day 2024-03-31T01:30:00+00:00 --tz Europe/Vienna
  hms time-of-day 2024-01-01T12:00:00-05:00
  HMS_COERCE__DEFAULT_TZ=UTC hms time-of-day 2024-01-01T12:00:00-05:00""",
)
@click.argument("timestamps", nargs=-1, required=True)
@click.option(
    "--tz",
    default=None,
    help="Time zone for the wall-clock reading (default: [coerce] default_tz, "
    "else each timestamp's own zone).",
)
@click.pass_obj
def time_of_day(app: AppContext, timestamps: tuple[str, ...], tz: str | None) -> None:
    """Show the time of day of ISO 8601 TIMESTAMPS."""
    app.emit(app.service.time_of_day(list(timestamps), tz=tz))
