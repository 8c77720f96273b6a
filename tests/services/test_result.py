"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from edugraph.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="create_yields", data={"id": "abc"})
        assert result.ok is True
        assert result.op == "create_yields"
        assert result.data == {"id": "abc"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("create_yields", "NOT_FOUND", ["a missing", "b missing"])
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.messages == ["a missing", "b missing"]
        assert result.error.message == "a missing; b missing"

    def test_json_serialization(self) -> None:
        result = ServiceResult.failure("create_yields", "CYCLE", ["loop"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["messages"] == ["loop"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_from_messages_detail(self) -> None:
        error = ServiceError.from_messages("SELF_LOOP", ["same id"], detail={"id": "x"})
        assert error.detail == {"id": "x"}

    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
        assert error.messages == []
