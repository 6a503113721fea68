"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from hms.domain.errors import HmsParseError, HmsValidationError
from hms.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="format", data={"count": 1})
        assert result.ok is True
        assert result.op == "format"
        assert result.data == {"count": 1}
        assert result.warnings == []
        assert result.error is None

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"display": ["0:00:01"]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["display"] == ["0:00:01"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="format")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_failure_from_exception(self) -> None:
        result = ServiceResult.failure("build", HmsValidationError("Lengths differ"))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.message == "Lengths differ"
        assert result.error.detail == {}


class TestServiceError:
    def test_from_parse_error_keeps_inputs(self) -> None:
        error = ServiceError.from_exception(HmsParseError("bad", inputs=["x", "y"]))
        assert error.code == "PARSE_ERROR"
        assert error.detail == {"inputs": ["x", "y"]}

    def test_internal_details_not_exposed(self) -> None:
        exc = HmsValidationError("Lengths differ", "seconds=2, minutes=1")
        error = ServiceError.from_exception(exc)
        assert "seconds=2" not in error.message
        assert error.detail == {}
