"""Fixed-format rendering of hms values as ``[-]H:MM:SS[.fff]``.

The layout does not depend on locale.  Hours have no leading zero and
no upper bound; minutes and seconds are always two digits; the fraction
uses the fewest digits that reproduce the stored value.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING

from hms.domain.decompose import decompose

if TYPE_CHECKING:
    from hms.domain.value import Hms

NA_LABEL = "NA"
EMPTY_LABEL = "hms()"


def format_hours(hours: int) -> str:
    return str(hours)


def format_two_digits(value: int) -> str:
    return f"{value:02d}"


def format_split_seconds(split_seconds: Decimal) -> str:
    """Render the fractional remainder as ``.fff`` or ``""`` when it is zero."""
    if not split_seconds:
        return ""
    digits = format(split_seconds, "f")
    return digits[digits.index(".") :].rstrip("0")


def format_seconds(seconds: float) -> str:
    """Format a single seconds count."""
    if math.isnan(seconds):
        return NA_LABEL
    if math.isinf(seconds):
        return "-Inf" if seconds < 0 else "Inf"

    parts = decompose(seconds)
    return "".join(
        (
            "-" if parts.sign else "",
            format_hours(parts.hours),
            ":",
            format_two_digits(parts.minute_of_hour),
            ":",
            format_two_digits(parts.second_of_minute),
            format_split_seconds(parts.split_seconds),
        )
    )


def as_character(value: Hms | Iterable[float]) -> list[str]:
    """Format each element independently, without alignment."""
    from hms.domain.value import Hms

    seconds = value.seconds if isinstance(value, Hms) else value
    return [format_seconds(s) for s in seconds]


def justify_right(lines: list[str]) -> list[str]:
    """Left-pad strings to a common width so colons line up."""
    width = max((len(line) for line in lines), default=0)
    return [line.rjust(width) for line in lines]


def format_hms(value: Hms, *, justify: bool = True) -> list[str]:
    """Format an hms value for display.

    An empty value renders as the single placeholder ``"hms()"``.
    Otherwise each element is formatted and, when *justify* is set,
    right-aligned to the widest entry.
    """
    if len(value) == 0:
        return [EMPTY_LABEL]
    lines = as_character(value)
    return justify_right(lines) if justify else lines
