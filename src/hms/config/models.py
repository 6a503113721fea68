"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, hms.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

# --- hms.toml sections ---


class CoerceConfig(BaseModel):
    """[coerce] section.

    ``default_tz`` replaces the time zone used when a timestamp is coerced
    without an explicit ``tz``.  Unset means the timestamp's own zone;
    ``"UTC"`` restores the behaviour of hms 0.3 and earlier.
    """

    model_config = {"frozen": True}

    default_tz: str | None = None

    @field_validator("default_tz")
    @classmethod
    def _empty_is_unset(cls, value: str | None) -> str | None:
        return value or None


class FormatConfig(BaseModel):
    """[format] section."""

    model_config = {"frozen": True}

    justify: bool = True
