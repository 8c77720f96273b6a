"""Tests for the format_result dispatcher and OutputSettings."""

import json

from edugraph.output.formatters import OutputSettings, format_result
from edugraph.services.result import ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", *messages: str) -> ServiceResult:
    return ServiceResult.failure(op, "NOT_FOUND", list(messages) or ["fail"])


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("create_yields", id="e1"), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "create_yields"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_err(), settings=settings))["ok"] is False


class TestFormatResultQuiet:
    def test_success_prints_id(self) -> None:
        assert format_result(_ok(id="e1"), settings=OutputSettings(quiet=True)) == "e1"

    def test_success_without_id(self) -> None:
        assert format_result(_ok("check"), settings=OutputSettings(quiet=True)) == "OK: check"

    def test_error_prints_each_message(self) -> None:
        result = _err("create_yields", "start node a does not exist", "end node b does not exist")
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output.splitlines() == ["start node a does not exist", "end node b does not exist"]


class TestFormatResultRich:
    def test_default_is_rich(self) -> None:
        output = format_result(_ok("delete_yields", id="e1"))
        assert "OK" in output
        assert "delete_yields" in output
        assert "e1" in output
