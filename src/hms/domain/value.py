"""The hms value type: an immutable vector of seconds since midnight.

INVARIANT: The unit is always seconds.  Missing values are stored as NaN
and propagate through arithmetic, comparison and formatting.  Every
operation returns a new value; an ``Hms`` is never mutated.
"""

from __future__ import annotations

import math
import numbers
import operator
import warnings
from collections.abc import Callable, Iterable, Iterator, Sequence
from datetime import timedelta
from typing import Any, overload

from rich.text import Text

from hms.domain.errors import HmsTypeError, HmsUnitsWarning, HmsValidationError, type_name
from hms.domain.format import format_hms

UNITS = "secs"


def to_seconds(value: object) -> float:
    """Convert one scalar to a float seconds count.

    ``None`` and NaN become the missing marker.  Booleans are rejected even
    though they are integers.
    """
    if value is None:
        return math.nan
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        msg = f"Can't use object of type {type_name(value)} as a number of seconds."
        raise HmsTypeError(msg)
    return float(value)


def _timedelta(seconds: float) -> timedelta | None:
    if not math.isfinite(seconds):
        return None
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        return None


def _divide(a: float, b: float) -> float:
    # NaN / 0 would raise before the missing value could propagate.
    return math.nan if math.isnan(a) else a / b


class Hms(Sequence["Hms"]):
    """Time-of-day values stored as seconds since midnight.

    Behaves as an immutable sequence: ``len()`` gives the element count,
    indexing returns a one-element ``Hms`` and slicing returns an ``Hms``.
    No bounds checking is done, so ``Hms([90000])`` is ``25:00:00``.
    """

    __slots__ = ("_seconds",)

    _seconds: tuple[float, ...]

    def __init__(self, seconds: Iterable[float | None] = ()) -> None:
        object.__setattr__(self, "_seconds", tuple(to_seconds(s) for s in seconds))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ── Sequence protocol ─────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._seconds)

    @overload
    def __getitem__(self, index: int) -> Hms: ...

    @overload
    def __getitem__(self, index: slice) -> Hms: ...

    def __getitem__(self, index: int | slice) -> Hms:
        if isinstance(index, slice):
            return Hms(self._seconds[index])
        return Hms((self._seconds[index],))

    def __iter__(self) -> Iterator[Hms]:
        for s in self._seconds:
            yield Hms((s,))

    # ── Accessors ─────────────────────────────────────────────────────

    @property
    def seconds(self) -> tuple[float, ...]:
        """Raw seconds counts, NaN for missing entries."""
        return self._seconds

    @property
    def units(self) -> str:
        return UNITS

    def with_units(self, units: str) -> Hms:
        """Return this value unchanged; hms values are always in seconds.

        Any unit other than ``"secs"`` emits :class:`HmsUnitsWarning`.
        """
        if units != UNITS:
            warnings.warn("hms always uses seconds as unit.", HmsUnitsWarning, stacklevel=2)
        return self

    def is_missing(self) -> tuple[bool, ...]:
        return tuple(math.isnan(s) for s in self._seconds)

    def to_timedelta(self) -> list[timedelta | None]:
        """Convert each element to a ``timedelta``.

        Missing, infinite and out-of-range elements (beyond
        ``timedelta.max``, about 2.7 million years) map to None.
        """
        return [_timedelta(s) for s in self._seconds]

    @classmethod
    def concat(cls, *values: object) -> Hms:
        """Concatenate values into a new ``Hms``.

        Non-``Hms`` arguments are coerced with :func:`hms.domain.coerce.as_hms`.
        """
        from hms.domain.coerce import as_hms

        parts: list[float] = []
        for value in values:
            parts.extend(as_hms(value).seconds)
        return cls(parts)

    # ── Conversions ───────────────────────────────────────────────────

    def __float__(self) -> float:
        if len(self._seconds) != 1:
            msg = f"Only a single hms value can be converted to float, got {len(self)}"
            raise TypeError(msg)
        return self._seconds[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._seconds)!r})"

    def __str__(self) -> str:
        return "\n".join(format_hms(self))

    def __rich__(self) -> Text:
        return Text(str(self))

    # ── Equality ──────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hms):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            a == b or (math.isnan(a) and math.isnan(b))
            for a, b in zip(self._seconds, other._seconds)
        )

    def __hash__(self) -> int:
        return hash(tuple(None if math.isnan(s) else s for s in self._seconds))

    # ── Arithmetic ────────────────────────────────────────────────────

    def _operand(self, other: object) -> tuple[float, ...] | None:
        if isinstance(other, Hms):
            values = other._seconds
        elif isinstance(other, timedelta):
            values = (other.total_seconds(),)
        elif isinstance(other, numbers.Real) and not isinstance(other, bool):
            values = (float(other),)
        else:
            return None
        return values

    def _recycle(self, other: tuple[float, ...]) -> Iterator[tuple[float, float]]:
        n, m = len(self._seconds), len(other)
        if m == 1:
            return ((s, other[0]) for s in self._seconds)
        if n == 1:
            return ((self._seconds[0], o) for o in other)
        if n != m:
            msg = f"Can't combine hms values of lengths {n} and {m}."
            raise HmsValidationError(msg)
        return zip(self._seconds, other)

    def _binary(self, other: object, op: Callable[[float, float], float]) -> Hms:
        values = self._operand(other)
        if values is None:
            return NotImplemented
        return Hms(op(a, b) for a, b in self._recycle(values))

    def __add__(self, other: object) -> Hms:
        return self._binary(other, operator.add)

    def __radd__(self, other: object) -> Hms:
        return self._binary(other, lambda a, b: b + a)

    def __sub__(self, other: object) -> Hms:
        return self._binary(other, operator.sub)

    def __rsub__(self, other: object) -> Hms:
        return self._binary(other, lambda a, b: b - a)

    def __mul__(self, other: object) -> Hms:
        if isinstance(other, (Hms, timedelta)):
            return NotImplemented
        return self._binary(other, operator.mul)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Hms:
        if isinstance(other, (Hms, timedelta)):
            return NotImplemented
        return self._binary(other, _divide)

    def __neg__(self) -> Hms:
        return Hms(-s for s in self._seconds)

    def __pos__(self) -> Hms:
        return self

    def __abs__(self) -> Hms:
        return Hms(abs(s) for s in self._seconds)

    # ── Elementwise comparison ────────────────────────────────────────

    def _compare(
        self, other: object, op: Callable[[float, float], bool]
    ) -> tuple[bool | None, ...]:
        values = self._operand(other)
        if values is None:
            msg = f"Can't compare hms with object of type {type_name(other)}."
            raise HmsTypeError(msg)
        return tuple(
            None if math.isnan(a) or math.isnan(b) else op(a, b)
            for a, b in self._recycle(values)
        )

    def eq(self, other: object) -> tuple[bool | None, ...]:
        """Elementwise ``==``; ``None`` where either side is missing."""
        return self._compare(other, operator.eq)

    def ne(self, other: object) -> tuple[bool | None, ...]:
        return self._compare(other, operator.ne)

    def lt(self, other: object) -> tuple[bool | None, ...]:
        return self._compare(other, operator.lt)

    def le(self, other: object) -> tuple[bool | None, ...]:
        return self._compare(other, operator.le)

    def gt(self, other: object) -> tuple[bool | None, ...]:
        return self._compare(other, operator.gt)

    def ge(self, other: object) -> tuple[bool | None, ...]:
        return self._compare(other, operator.ge)


def is_hms(obj: object) -> bool:
    """Report whether *obj* is an hms value."""
    return isinstance(obj, Hms)
