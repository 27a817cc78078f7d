"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from mithril.services.result import ServiceError, ServiceResult


class TestSuccess:
    def test_fields(self) -> None:
        result = ServiceResult.success("inspect_demo", {"head": "deadbeef"})
        assert result.ok is True
        assert result.op == "inspect_demo"
        assert result.data == {"head": "deadbeef"}
        assert result.error is None
        assert result.meta is None

    def test_json(self) -> None:
        result = ServiceResult.success(
            "inspect_demo", {"payload_nbytes": 4}, meta={"source": "<stdin>"}
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["payload_nbytes"] == 4
        assert parsed["meta"]["source"] == "<stdin>"
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult.success("inspect_demo", {})
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestFailure:
    def test_fields(self) -> None:
        result = ServiceResult.failure(
            "inspect_demo", "IO_FAILURE", "Could not read replay", detail={"cause": "EOFError()"}
        )
        assert result.ok is False
        assert result.data == {}
        assert result.error == ServiceError(
            code="IO_FAILURE", message="Could not read replay", detail={"cause": "EOFError()"}
        )

    def test_default_detail(self) -> None:
        result = ServiceResult.failure("inspect_demo", "INVALID_FORMAT", "bad")
        assert result.error is not None
        assert result.error.detail == {}


class TestConsistency:
    def test_failure_requires_error(self) -> None:
        with pytest.raises(ValidationError):
            ServiceResult(ok=False, op="inspect_demo")

    def test_success_rejects_error(self) -> None:
        with pytest.raises(ValidationError):
            ServiceResult(
                ok=True,
                op="inspect_demo",
                error=ServiceError(code="INVALID_FORMAT", message="bad"),
            )
