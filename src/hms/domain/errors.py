"""Exception and warning hierarchy for hms.

Every error carries a short user-facing message plus internal details
for logging.  Errors also derive from the matching builtin
(``TypeError``/``ValueError``) so callers can catch them generically.
"""

from __future__ import annotations


class HmsError(Exception):
    """Base exception for all hms errors."""

    code = "HMS_ERROR"

    def __init__(self, user_message: str, internal_details: str = "") -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message

    def internal(self) -> str:
        return self.internal_details


class HmsTypeError(HmsError, TypeError):
    """Raised when an object of an unsupported type is coerced to hms."""

    code = "INVALID_TYPE"


class HmsValidationError(HmsError, ValueError):
    """Raised when constructor arguments are inconsistent."""

    code = "VALIDATION_ERROR"


class HmsValueError(HmsError, ValueError):
    """Raised for invalid argument values, e.g. an unknown time zone."""

    code = "INVALID_VALUE"


class HmsParseError(HmsError, ValueError):
    """Raised by strict parsing when some inputs do not match the format."""

    code = "PARSE_ERROR"

    def __init__(self, user_message: str, inputs: list[str], internal_details: str = "") -> None:
        super().__init__(user_message, internal_details)
        self.inputs = inputs


class HmsWarning(UserWarning):
    """Base class for non-fatal hms diagnostics."""


class HmsParseWarning(HmsWarning):
    """Some entries of a vectorized parse could not be parsed."""


class HmsUnitsWarning(HmsWarning):
    """An attempt was made to change the unit of an hms value."""


def type_name(obj: object) -> str:
    """Qualified type name used in error messages."""
    cls = type(obj)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
