"""Tests for the segments CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from rubyfilter.cli import cli

DAIMYO = (
    "\\ruby{大名}{だい|みょう}は\\ruby{武|家|諸|法度}{ぶ|け|しょ|はっと}"
    "などによる統制を受けた。"
)


class TestSegmentsCommand:
    def test_segments_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "segments"], input=DAIMYO)
        assert result.exit_code == 0
        data = json.loads(result.output)
        kinds = [item["kind"] for item in data["data"]["items"]]
        assert kinds == ["annotation", "plain", "annotation", "plain"]
        assert data["data"]["items"][0]["base"] == ["大", "名"]

    def test_segments_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["segments"], input=DAIMYO)
        assert result.exit_code == 0
        assert "count: 4" in result.output
        assert "大/だい" in result.output

    def test_segments_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["segments", "--examples"])
        assert result.exit_code == 0
        assert "segments" in result.output
