"""Tests for the format_result dispatcher and OutputSettings."""

import json

from enginewire.output.formatters import OutputSettings, format_result
from enginewire.services.result import ServiceError, ServiceResult


def _ok(op: str = "build_engine", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "build_engine", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="MISSING_KEY", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        out = format_result(_ok(description="d"), settings=OutputSettings(json_output=True))
        data = json.loads(out)
        assert data["ok"] is True
        assert data["op"] == "build_engine"
        assert data["data"]["description"] == "d"

    def test_json_mode_error(self) -> None:
        out = format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(out)
        assert data["ok"] is False
        assert data["error"]["code"] == "MISSING_KEY"
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        out = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["ok"] is True

    def test_quiet_mode(self) -> None:
        out = format_result(_ok(description="d"), settings=OutputSettings(quiet=True))
        assert out == "d"

    def test_default_is_human(self) -> None:
        assert format_result(_ok(description="Pistons: \nTires: ")).startswith("Pistons:")
