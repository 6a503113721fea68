"""Shared pytest fixtures for hms tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory with no ``HMS_*`` env vars.

    Keeps a developer's hms.toml or exported overrides from leaking into
    settings resolution.
    """
    for name in list(os.environ):
        if name.upper().startswith("HMS_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the hms logger; the CLI reconfigures logging on every run."""
    hms_logger = logging.getLogger("hms")
    original_handlers = hms_logger.handlers[:]
    original_level = hms_logger.level
    original_propagate = hms_logger.propagate
    yield
    hms_logger.handlers = original_handlers
    hms_logger.setLevel(original_level)
    hms_logger.propagate = original_propagate


@pytest.fixture
def write_config(tmp_path: Path):
    """Write an hms.toml into the test's working directory."""

    def _write(content: str) -> Path:
        path = tmp_path / "hms.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
