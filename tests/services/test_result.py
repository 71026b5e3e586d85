"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from nowctl.domain.types import ErrorCode
from nowctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="add_domain", data={"domain": "example.com"})
        assert result.ok is True
        assert result.op == "add_domain"
        assert result.data == {"domain": "example.com"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_success_helper(self) -> None:
        result = ServiceResult.success("attach_domain", domain="example.com", forced=False)
        assert result.ok is True
        assert result.data == {"domain": "example.com", "forced": False}

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure(
            "add_domain",
            ErrorCode.ALIAS_DOMAIN_EXIST,
            "Domain already in use",
            detail={"project": {"id": "prj_1"}},
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "ALIAS_DOMAIN_EXIST"
        assert type(result.error.code) is str
        assert result.error.detail["project"]["id"] == "prj_1"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="test", data={"key": "value"}, meta={"duration_ms": 42})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["key"] == "value"
        assert parsed["meta"]["duration_ms"] == 42

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
