"""hms - time-of-day values stored as seconds since midnight."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hms-time")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from hms.api import as_hms, from_datetime
from hms.domain.coerce import to_datetime
from hms.domain.construct import from_seconds, hms
from hms.domain.errors import (
    HmsError,
    HmsParseError,
    HmsParseWarning,
    HmsTypeError,
    HmsUnitsWarning,
    HmsValidationError,
    HmsValueError,
    HmsWarning,
)
from hms.domain.format import as_character, format_hms
from hms.domain.parse import parse_hms
from hms.domain.value import Hms, is_hms

__all__ = [
    "Hms",
    "hms",
    "is_hms",
    "as_hms",
    "from_seconds",
    "from_datetime",
    "to_datetime",
    "parse_hms",
    "format_hms",
    "as_character",
    "HmsError",
    "HmsTypeError",
    "HmsValidationError",
    "HmsValueError",
    "HmsParseError",
    "HmsWarning",
    "HmsParseWarning",
    "HmsUnitsWarning",
]
