"""ConvertService — the conversions behind the ``hms`` CLI commands."""

from __future__ import annotations

import logging
import math
import warnings
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

from hms.domain.coerce import from_datetime
from hms.domain.construct import from_seconds, hms
from hms.domain.errors import HmsError, HmsValueError, HmsWarning
from hms.domain.format import as_character, format_hms
from hms.domain.parse import parse_hms
from hms.services.result import ServiceResult

if TYPE_CHECKING:
    from hms.config.settings import HmsSettings
    from hms.domain.value import Hms

logger = logging.getLogger(__name__)

MISSING_TOKENS = frozenset({"", "NA", "NaN", "nan"})


def _parse_number(text: str) -> float | None:
    if text.strip() in MISSING_TOKENS:
        return None
    try:
        return float(text)
    except ValueError as exc:
        raise HmsValueError(f"Not a number of seconds: {text!r}") from exc


def _parse_timestamp(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text.strip())
    except ValueError as exc:
        raise HmsValueError(f"Not an ISO 8601 timestamp: {text!r}") from exc


def _json_seconds(s: float) -> float | None:
    return s if math.isfinite(s) else None


class ConvertService:
    """Converts between seconds, text and timestamps.

    Every method returns a :class:`ServiceResult`; hms errors become
    failed results and hms warnings are collected into ``warnings``.
    """

    def __init__(self, settings: HmsSettings) -> None:
        self._settings = settings

    def _success(
        self,
        op: str,
        value: Hms,
        inputs: Sequence[str] | None = None,
        messages: list[str] | None = None,
        **extra: Any,
    ) -> ServiceResult:
        texts = as_character(value)
        items: list[dict[str, Any]] = []
        for i, (seconds, text) in enumerate(zip(value.seconds, texts)):
            item: dict[str, Any] = {}
            if inputs is not None:
                item["input"] = inputs[i]
            item["seconds"] = _json_seconds(seconds)
            item["hms"] = text
            items.append(item)

        data: dict[str, Any] = {
            "count": len(value),
            "items": items,
            "display": format_hms(value, justify=self._settings.format.justify),
            **extra,
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=messages or [])

    def format_seconds(self, values: Sequence[str]) -> ServiceResult:
        """Format seconds counts given as text (``NA`` for missing)."""
        op = "format"
        try:
            value = from_seconds([_parse_number(v) for v in values])
        except HmsError as exc:
            return ServiceResult.failure(op, exc)
        return self._success(op, value, inputs=values)

    def parse(self, texts: Sequence[str], *, strict: bool = False) -> ServiceResult:
        """Parse ``H:MM:SS`` strings; unparsable ones become warnings unless *strict*."""
        op = "parse"
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", HmsWarning)
            try:
                value = parse_hms(list(texts), strict=strict)
            except HmsError as exc:
                logger.debug("Strict parse failed: %s", exc.internal())
                return ServiceResult.failure(op, exc)
        messages = [str(w.message) for w in caught if issubclass(w.category, HmsWarning)]
        return self._success(op, value, inputs=texts, messages=messages)

    def build(
        self,
        *,
        seconds: Sequence[float] | None = None,
        minutes: Sequence[float] | None = None,
        hours: Sequence[float] | None = None,
        days: Sequence[float] | None = None,
    ) -> ServiceResult:
        """Build values from component sequences of equal length."""
        op = "build"
        try:
            value = hms(seconds=seconds, minutes=minutes, hours=hours, days=days)
        except HmsError as exc:
            return ServiceResult.failure(op, exc)
        return self._success(op, value)

    def time_of_day(self, timestamps: Sequence[str], *, tz: str | None = None) -> ServiceResult:
        """Extract the time of day of ISO 8601 timestamps.

        Without *tz* the configured ``[coerce] default_tz`` is used, and
        failing that each timestamp's own zone.
        """
        op = "time_of_day"
        zone = tz or self._settings.coerce.default_tz
        try:
            value = from_datetime([_parse_timestamp(t) for t in timestamps], zone)
        except HmsError as exc:
            return ServiceResult.failure(op, exc)
        logger.debug("Converted %d timestamps in zone %s", len(value), zone or "own")
        return self._success(op, value, inputs=timestamps, tz=zone)
