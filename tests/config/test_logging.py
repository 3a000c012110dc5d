"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from rubyfilter.config.logging import PACKAGE_LOGGER, PIPELINE_LOGGER, configure_logging
from rubyfilter.pipeline.events import Text
from rubyfilter.pipeline.filter import RubyEventFilter

MISALIGNED = [Text("前\\ruby{a|b}{x|y|z}後")]


class TestLevels:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger(PIPELINE_LOGGER).getEffectiveLevel() == logging.DEBUG

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_quiet_is_error(self) -> None:
        configure_logging(quiet=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        configure_logging(verbose=True, quiet=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_root_logger_is_untouched(self) -> None:
        root = logging.getLogger()
        handlers = root.handlers[:]
        configure_logging(verbose=True)
        assert root.handlers == handlers


class TestPipelineWarnings:
    def test_held_back_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        list(RubyEventFilter(MISALIGNED))
        assert capfd.readouterr().err == ""

    def test_logged_when_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        list(RubyEventFilter(MISALIGNED))
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["logger"] == PIPELINE_LOGGER
        assert parsed["level"] == "warning"
        assert "at offset 1" in parsed["event"]


class TestOutput:
    def test_human_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        structlog.get_logger("rubyfilter.test").warning("hello world", key="val")
        err = capfd.readouterr().err
        assert "hello world" in err
        assert "key" in err

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("rubyfilter.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "rubyfilter.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("rubyfilter.domain.scanner").debug("Rejected \\ruby at offset 3")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Rejected \\ruby at offset 3"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "rubyfilter.domain.scanner"

    def test_non_ascii_is_kept(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        logging.getLogger("rubyfilter.services.filter").warning("鶏")
        assert "鶏" in capfd.readouterr().err

    def test_other_libraries_are_not_routed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("somelib").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Repeated calls replace the handler instead of stacking another."""
        first = configure_logging(verbose=True, log_json=False)
        second = configure_logging(verbose=True, log_json=True)
        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert second in handlers
        assert first not in handlers
