"""Command: build time-of-day values from components."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hms.commands._base import HmsCommand

if TYPE_CHECKING:
    from hms.commands._context import AppContext


@click.command(
    cls=HmsCommand,
    examples="""\
  hms build -s 56 -m 34 -H 12
  hms build -H 1 -H 2 -H 3
  hms build -d 1 -H 1
  hms --json build -s 30 -s 45 -m 1 -m 2""",
)
@click.option("-s", "--seconds", type=float, multiple=True, help="Seconds (repeatable).")
@click.option("-m", "--minutes", type=float, multiple=True, help="Minutes (repeatable).")
@click.option("-H", "--hours", type=float, multiple=True, help="Hours (repeatable).")
@click.option("-d", "--days", type=float, multiple=True, help="Days (repeatable).")
@click.pass_obj
def build(
    app: AppContext,
    seconds: tuple[float, ...],
    minutes: tuple[float, ...],
    hours: tuple[float, ...],
    days: tuple[float, ...],
) -> None:
    """Build values from components; repeated options must have equal counts."""
    app.emit(
        app.service.build(
            seconds=list(seconds) or None,
            minutes=list(minutes) or None,
            hours=list(hours) or None,
            days=list(days) or None,
        )
    )
