"""Breakdown of a seconds count into sign, hours, minutes, seconds and fraction."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import NamedTuple

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


class Decomposed(NamedTuple):
    """Transient display form of one hms element.

    ``sign`` is tracked separately from the magnitude so that ``-0.0``
    keeps its minus sign.  ``hours`` is unbounded (no wraparound at 24).
    """

    sign: bool
    hours: int
    minute_of_hour: int
    second_of_minute: int
    split_seconds: Decimal


def decompose(seconds: float) -> Decomposed:
    """Decompose a finite seconds count.

    The fractional remainder is taken from the shortest decimal string
    that round-trips the float, so ``12.3`` yields ``Decimal("0.3")``
    rather than the binary approximation of ``12.3 - 12``.

    Raises:
        ValueError: If *seconds* is NaN or infinite.
    """
    if not math.isfinite(seconds):
        raise ValueError(f"Cannot decompose non-finite value {seconds!r}")

    sign = math.copysign(1.0, seconds) < 0
    magnitude = Decimal(repr(abs(float(seconds))))
    whole = int(magnitude)
    split_seconds = (magnitude - whole).normalize()

    hours, rest = divmod(whole, SECONDS_PER_HOUR)
    minute_of_hour, second_of_minute = divmod(rest, SECONDS_PER_MINUTE)
    return Decomposed(sign, hours, minute_of_hour, second_of_minute, split_seconds)
