"""Parsing of ``[-]H:MM:SS[.fff]`` strings into hms values.

Accepted format (after trimming surrounding whitespace)::

    ^(-)?(\\d+):([0-5]\\d):([0-5]\\d)(\\.\\d+)?$

Hours take any number of digits, minutes and seconds exactly two digits
in ``00``–``59``.  The sign applies to the whole value.  This is the
format produced by :func:`hms.domain.format.format_hms`.
"""

from __future__ import annotations

import logging
import math
import re
import warnings
from collections.abc import Iterable
from decimal import Decimal

from hms.domain.decompose import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from hms.domain.errors import HmsParseError, HmsParseWarning, HmsTypeError, type_name
from hms.domain.value import Hms

logger = logging.getLogger(__name__)

HMS_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<sign>-)?(?P<hours>\d+):(?P<minutes>[0-5]\d):(?P<seconds>[0-5]\d)(?P<fraction>\.\d+)?$",
    re.ASCII,
)

# Number of offending inputs quoted in warnings and errors.
MAX_REPORTED = 5


def parse_one(text: str) -> float | None:
    """Parse a single string; return None if it does not match the format."""
    match = HMS_PATTERN.match(text.strip())
    if match is None:
        return None

    magnitude = (
        int(match["hours"]) * SECONDS_PER_HOUR
        + int(match["minutes"]) * SECONDS_PER_MINUTE
        + int(match["seconds"])
        + Decimal(f"0{match['fraction'] or ''}")
    )
    value = float(magnitude)
    return -value if match["sign"] else value


def _describe(failed: list[str]) -> str:
    shown = ", ".join(repr(f) for f in failed[:MAX_REPORTED])
    if len(failed) > MAX_REPORTED:
        shown += f", ... ({len(failed) - MAX_REPORTED} more)"
    return shown


def parse_hms(text: str | Iterable[str | None], *, strict: bool = False) -> Hms:
    """Parse one string or a sequence of strings into an hms value.

    ``None`` entries are missing and are not reported.  Entries that do not
    match the format become missing too; once all entries are processed a
    single :class:`HmsParseWarning` names the failures.

    Args:
        text: A string or an iterable of strings.
        strict: Raise :class:`HmsParseError` instead of warning.

    Raises:
        HmsParseError: In strict mode, if any entry fails to parse.
        HmsTypeError: If an entry is neither a string nor None.
    """
    items: list[str | None] = [text] if isinstance(text, str) else list(text)

    seconds: list[float] = []
    failed: list[str] = []
    for item in items:
        if item is None:
            seconds.append(math.nan)
            continue
        if not isinstance(item, str):
            msg = f"Can't parse object of type {type_name(item)} as hms."
            raise HmsTypeError(msg)
        value = parse_one(item)
        if value is None:
            failed.append(item)
            seconds.append(math.nan)
        else:
            seconds.append(value)

    if failed:
        logger.debug("Failed to parse %d of %d hms strings", len(failed), len(items))
        msg = f"{len(failed)} value(s) could not be parsed as hms: {_describe(failed)}"
        if strict:
            raise HmsParseError(msg, inputs=failed)
        warnings.warn(msg, HmsParseWarning, stacklevel=2)

    return Hms(seconds)
