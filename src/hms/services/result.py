"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Service methods never raise for bad user input; hms errors are
turned into a failed ServiceResult carrying the error's code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from hms.domain.errors import HmsError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: HmsError) -> ServiceError:
        detail: dict[str, Any] = {}
        inputs = getattr(exc, "inputs", None)
        if inputs:
            detail["inputs"] = list(inputs)
        return cls(code=exc.code, message=exc.user_message, detail=detail)


class ServiceResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as unparsable entries.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: HmsError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
