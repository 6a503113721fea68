"""Command: parse H:MM:SS strings into seconds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hms.commands._base import HmsCommand

if TYPE_CHECKING:
    from hms.commands._context import AppContext


@click.command(
    cls=HmsCommand,
    examples="""\
  hms parse 12:34:56
  hms parse -- -0:00:01.5 25:00:00
  hms parse --strict 12:34:56 not-a-time
  hms -v parse 1:02:03""",
)
@click.argument("texts", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Fail if any value cannot be parsed.")
@click.pass_obj
def parse(app: AppContext, texts: tuple[str, ...], strict: bool) -> None:
    """Parse TEXTS in [-]H:MM:SS[.fff] format."""
    app.emit(app.service.parse(list(texts), strict=strict))
