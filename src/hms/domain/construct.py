"""Construction of hms values from seconds, minutes, hours and days."""

from __future__ import annotations

import numbers
import operator
from collections.abc import Iterable
from functools import reduce

from hms.domain.decompose import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from hms.domain.errors import HmsTypeError, HmsValidationError, type_name
from hms.domain.value import Hms, to_seconds

Component = float | Iterable[float | None] | None

UNIT_MULTIPLIERS: dict[str, int] = {
    "seconds": 1,
    "minutes": SECONDS_PER_MINUTE,
    "hours": SECONDS_PER_HOUR,
    "days": SECONDS_PER_DAY,
}


def _as_vector(name: str, value: Component) -> list[float]:
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return [float(value)]
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        msg = f"Argument '{name}' must be numeric, got {type_name(value)}."
        raise HmsTypeError(msg)
    return [to_seconds(v) for v in value]


def check_args(args: dict[str, list[float]]) -> None:
    """Reject provided arguments whose lengths differ.

    Raises:
        HmsValidationError: If any two provided arguments have different lengths.
    """
    lengths = {name: len(values) for name, values in args.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        msg = f"All arguments must have the same length or be None. Lengths: {detail}."
        raise HmsValidationError(msg)


def hms(
    seconds: Component = None,
    minutes: Component = None,
    hours: Component = None,
    days: Component = None,
) -> Hms:
    """Build an hms value from components.

    Each provided argument is a number or a sequence of numbers; all
    provided arguments must have the same length.  Components are scaled
    to seconds and summed elementwise.  No bounds checking is done, so
    ``hms(minutes=90)`` is ``1:30:00``.  With no arguments the result is
    an empty ``Hms``.

    Raises:
        HmsValidationError: If provided arguments differ in length.
        HmsTypeError: If an argument is not numeric.
    """
    given = {"seconds": seconds, "minutes": minutes, "hours": hours, "days": days}
    args = {
        name: _as_vector(name, value) for name, value in given.items() if value is not None
    }
    check_args(args)
    if not args:
        return Hms()

    scaled = [
        [v * UNIT_MULTIPLIERS[name] for v in values] for name, values in args.items()
    ]
    return Hms(reduce(operator.add, column) for column in zip(*scaled))


def from_seconds(n: Component) -> Hms:
    """Wrap a raw seconds count (or a sequence of them) without any checks."""
    return hms(seconds=n) if n is not None else Hms([None])
