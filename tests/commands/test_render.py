"""Tests for the render CLI command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from rubyfilter.cli import cli

CHICKEN = "これは\\ruby{鶏}{にわとり}"
CHICKEN_HTML = "<p>これは<ruby>鶏<rp>（</rp><rt>にわとり</rt><rp>）</rp></ruby></p>"
MISALIGNED = "\\ruby{a|b}{x|y|z}"


class TestRenderCommand:
    def test_render_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "SOURCE" in result.output
        assert "--open" in result.output

    def test_render_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render"], input=CHICKEN)
        assert result.exit_code == 0
        assert CHICKEN_HTML in result.output

    def test_render_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "doc.txt"
        source.write_text(CHICKEN + "\n\n吾輩は猫である。\n", encoding="utf-8")
        result = cli_runner.invoke(cli, ["render", str(source)])
        assert result.exit_code == 0
        assert CHICKEN_HTML in result.output
        assert "<p>吾輩は猫である。</p>" in result.output

    def test_render_custom_parens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render", "--open", "(", "--close", ")"], input=CHICKEN)
        assert result.exit_code == 0
        assert "<rp>(</rp><rt>にわとり</rt><rp>)</rp>" in result.output

    def test_render_parens_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "rubyfilter.toml").write_text('[render]\nopen_paren = "["\n')
        result = cli_runner.invoke(cli, ["render"], input=CHICKEN)
        assert result.exit_code == 0
        assert "<rp>[</rp>" in result.output

    def test_render_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "render"], input=CHICKEN)
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "render"
        assert data["data"]["annotations"] == 1
        assert data["data"]["html"] == CHICKEN_HTML + "\n"

    def test_render_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "render"], input=CHICKEN)
        assert result.exit_code == 0
        assert result.output == CHICKEN_HTML + "\n"

    def test_render_malformed_raw(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render"], input=MISALIGNED)
        assert result.exit_code == 0
        assert MISALIGNED in result.output
        assert "WARNING" in result.output

    def test_render_malformed_halt(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--on-error", "halt", "render"], input=MISALIGNED)
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_render_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render", "--examples"])
        assert result.exit_code == 0
        assert "rubyfilter render" in result.output
