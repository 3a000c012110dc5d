"""Tests for result formatting modes."""

from __future__ import annotations

import json

from rubyfilter.output.formatters import OutputSettings, format_result
from rubyfilter.services.result import ServiceResult


class TestFormatResult:
    def test_json_mode(self) -> None:
        result = ServiceResult(ok=True, op="render", data={"html": "<p>鶏</p>"})
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is True
        assert parsed["data"]["html"] == "<p>鶏</p>"

    def test_default_is_human(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"issues": [], "count": 0})
        assert "OK" in format_result(result)

    def test_quiet_mode(self) -> None:
        result = ServiceResult(ok=True, op="segments", data={"items": [], "count": 0})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: segments"

    def test_json_wins_over_quiet(self) -> None:
        result = ServiceResult(ok=True, op="check")
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "check"
