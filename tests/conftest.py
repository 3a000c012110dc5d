"""Shared pytest fixtures for rubyfilter tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from rubyfilter.config.settings import RubySettings


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no RUBYFILTER_* env vars.

    Keeps config discovery from picking up a ``rubyfilter.toml`` that
    happens to sit above the checkout.
    """
    for name in list(os.environ):
        if name.startswith("RUBYFILTER_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the rubyfilter logger state after each test.

    Commands call configure_logging(), which installs a stderr handler on the
    package logger and stops propagation to the root logger.
    """
    package_logger = logging.getLogger("rubyfilter")
    pipeline_logger = logging.getLogger("rubyfilter.pipeline.filter")
    saved = (
        package_logger.handlers[:],
        package_logger.level,
        package_logger.propagate,
        pipeline_logger.level,
    )
    yield
    handlers, level, propagate, pipeline_level = saved
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    pipeline_logger.setLevel(pipeline_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> RubySettings:
    """Settings built from code defaults only."""
    return RubySettings()
