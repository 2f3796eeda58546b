"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from tutorctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="link", data={"student": "Alex"})
        assert result.ok is True
        assert result.op == "link"
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOTHING_DISPLAYED", message="No student is shown")
        result = ServiceResult(ok=False, op="link", error=error)
        assert result.error is not None
        assert result.error.code == "NOTHING_DISPLAYED"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="parse_field", data={"value": 3})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["value"] == 3

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
