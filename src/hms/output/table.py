"""Tabular display of records that hold hms columns.

A column may be an :class:`~hms.domain.value.Hms` or any sized iterable.
The table only asks an ``Hms`` column for its element count and its
formatted rendering; hms columns are right-justified so colons align.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping, Sized
from typing import Any

from rich.table import Table
from rich.text import Text

from hms.domain.errors import HmsValidationError
from hms.domain.format import NA_LABEL, format_hms
from hms.domain.value import Hms
from hms.output.console import create_console, get_output


def column_cells(column: Hms | Iterable[Any]) -> list[str]:
    """Return the display strings of one column."""
    if isinstance(column, Hms):
        return format_hms(column) if len(column) else []
    return [NA_LABEL if value is None else str(value) for value in column]


def build_table(
    columns: Mapping[str, Hms | Iterable[Any]],
    *,
    right_justify: Collection[str] = (),
) -> Table:
    """Build a Rich Table from a mapping of column name to column.

    Hms columns and the columns named in *right_justify* are right-aligned.

    Raises:
        HmsValidationError: If the columns have different lengths.
    """
    cells = {name: column_cells(column) for name, column in columns.items()}
    lengths = {
        len(column) if isinstance(column, Sized) else len(cells[name])
        for name, column in columns.items()
    }
    if len(lengths) > 1:
        detail = ", ".join(f"{name}={len(c)}" for name, c in cells.items())
        raise HmsValidationError(f"Columns must have the same length. Lengths: {detail}.")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for name, column in columns.items():
        if isinstance(column, Hms) or name in right_justify:
            table.add_column(name, justify="right", style="hms.value", no_wrap=True)
        else:
            table.add_column(name)

    for row in zip(*cells.values()):
        table.add_row(*(Text(cell) for cell in row))
    return table


def render_table(
    columns: Mapping[str, Hms | Iterable[Any]],
    *,
    no_color: bool = True,
    width: int | None = None,
) -> str:
    """Render columns as a table and return the text."""
    console = create_console(no_color=no_color, width=width)
    console.print(build_table(columns))
    return get_output(console).rstrip("\n")
