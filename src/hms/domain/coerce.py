"""Coercion between hms values and numbers, strings, timestamps and timedeltas.

Dispatch is closed over the supported source types; anything else is an
:class:`HmsTypeError`.  This module never reads configuration: the
default time zone is an explicit argument (``None`` = the timestamp's
own zone).  :mod:`hms.api` resolves the configured override.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from hms.domain.construct import from_seconds, hms
from hms.domain.decompose import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from hms.domain.errors import HmsTypeError, HmsValueError, type_name
from hms.domain.parse import parse_hms
from hms.domain.value import Hms

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TimeZone = str | tzinfo | None


def resolve_zone(tz: TimeZone) -> tzinfo | None:
    """Turn a zone name or ``tzinfo`` into a ``tzinfo``; empty means None."""
    if tz is None or tz == "":
        return None
    if isinstance(tz, tzinfo):
        return tz
    if isinstance(tz, str):
        try:
            return ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise HmsValueError(f"Unknown time zone: {tz!r}", str(exc)) from exc
    raise HmsTypeError(f"Time zone must be a name or tzinfo, got {type_name(tz)}.")


def to_datetime(value: Hms) -> list[datetime | None]:
    """Interpret each element as an offset from the UTC epoch.

    Results are tagged UTC.  Missing and infinite elements map to None, as
    do elements outside the range of ``datetime`` (years 1 to 9999).
    """
    result: list[datetime | None] = []
    for offset in value.to_timedelta():
        try:
            result.append(None if offset is None else EPOCH + offset)
        except OverflowError:
            result.append(None)
    return result


def _time_of_day(ts: datetime, zone: tzinfo | None) -> float:
    if zone is not None:
        local = ts.astimezone(zone)
    elif ts.tzinfo is not None:
        local = ts.astimezone(ts.tzinfo)
    else:
        local = ts.astimezone()
    return (
        local.hour * SECONDS_PER_HOUR
        + local.minute * SECONDS_PER_MINUTE
        + local.second
        + local.microsecond / 1_000_000
    )


def from_datetime(ts: datetime | Sequence[datetime | None], tz: TimeZone = None) -> Hms:
    """Extract the time of day of timestamps in a time zone.

    The timestamp is converted to civil time in *tz* via its absolute
    instant, so DST and historical offset changes are honoured.  With
    ``tz=None`` the timestamp's own zone is used; naive timestamps are
    read in the host's local zone, as ``datetime.astimezone()`` does.
    Microseconds become fractional seconds.

    Raises:
        HmsValueError: If *tz* names an unknown zone.
    """
    zone = resolve_zone(tz)
    stamps = [ts] if isinstance(ts, datetime) else list(ts)
    seconds: list[float | None] = []
    for stamp in stamps:
        if stamp is None:
            seconds.append(None)
        elif isinstance(stamp, datetime):
            seconds.append(_time_of_day(stamp, zone))
        else:
            raise HmsTypeError(f"Expected datetime, got {type_name(stamp)}.")
    return Hms(seconds)


def _is_number(x: object) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def _from_sequence(items: Sequence[object], tz: TimeZone) -> Hms:
    present = [item for item in items if item is not None]
    if not present:
        return Hms([None] * len(items))

    if all(_is_number(item) for item in present):
        return hms(seconds=list(items))
    if all(isinstance(item, str) for item in present):
        return parse_hms(list(items))
    if all(isinstance(item, datetime) for item in present):
        return from_datetime(list(items), tz)
    if all(isinstance(item, timedelta) for item in present):
        return Hms(None if item is None else item.total_seconds() for item in items)
    if all(isinstance(item, Hms) for item in present):
        return Hms.concat(*(Hms([None]) if item is None else item for item in items))

    kinds = sorted({type_name(item) for item in present})
    raise HmsTypeError(f"Can't convert sequence of {', '.join(kinds)} to hms.")


def as_hms(x: object, *, tz: TimeZone = None) -> Hms:
    """Coerce *x* to an hms value.

    Supported: ``Hms`` (returned as is), ``None``, real numbers (seconds),
    strings (parsed), ``datetime`` (time of day in *tz*), ``timedelta``,
    and sequences of one of these kinds.

    Raises:
        HmsTypeError: For any other type, naming the type encountered.
    """
    if isinstance(x, Hms):
        return x
    if x is None:
        return Hms([None])
    if _is_number(x):
        return from_seconds(x)
    if isinstance(x, str):
        return parse_hms(x)
    if isinstance(x, datetime):
        return from_datetime(x, tz)
    if isinstance(x, timedelta):
        return Hms([x.total_seconds()])
    if isinstance(x, Sequence) and not isinstance(x, (bytes, bytearray)):
        return _from_sequence(x, tz)
    raise HmsTypeError(f"Can't convert object of type {type_name(x)} to hms.")
