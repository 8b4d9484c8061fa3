"""Tests for ServiceResult and ServiceError."""

import pytest

from enginewire.services.result import ServiceError, ServiceResult


def test_defaults() -> None:
    result = ServiceResult(ok=True, op="build_engine")
    assert result.data == {}
    assert result.warnings == []
    assert result.error is None


def test_failure_constructor() -> None:
    err = ServiceError(code="MISSING_KEY", message="missing")
    result = ServiceResult.failure("build_engine", err)
    assert result.ok is False
    assert result.error == err
    assert result.data == {}


def test_frozen() -> None:
    result = ServiceResult(ok=True, op="x")
    with pytest.raises(Exception):
        result.ok = False  # type: ignore[misc]
