"""Public coercion entry points that honour the configured default time zone.

:mod:`hms.domain.coerce` takes the time zone as a plain argument.  The
functions here fill it in from :class:`~hms.config.settings.HmsSettings`
(``[coerce] default_tz`` / ``HMS_COERCE__DEFAULT_TZ``) when the caller
does not pass one.  Passing ``tz=None`` explicitly always means the
timestamp's own zone.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Final

from hms.domain import coerce
from hms.domain.coerce import TimeZone
from hms.domain.value import Hms


class _Unset:
    def __repr__(self) -> str:
        return "<configured default>"


CONFIGURED: Final = _Unset()


def _zone(tz: TimeZone | _Unset) -> TimeZone:
    if isinstance(tz, _Unset):
        from hms.config.settings import resolve_default_tz

        return resolve_default_tz()
    return tz


def as_hms(x: object, *, tz: TimeZone | _Unset = CONFIGURED) -> Hms:
    """Coerce *x* to hms; see :func:`hms.domain.coerce.as_hms`."""
    return coerce.as_hms(x, tz=_zone(tz))


def from_datetime(
    ts: datetime | Sequence[datetime | None], tz: TimeZone | _Unset = CONFIGURED
) -> Hms:
    """Time of day of *ts*; see :func:`hms.domain.coerce.from_datetime`."""
    return coerce.from_datetime(ts, _zone(tz))
