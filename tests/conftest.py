"""Shared pytest fixtures for howoldami tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from howoldami.config.discovery import CONFIG_ENV_VAR

_ENV_KEYS = ("BIRTHDAY", "BIRTHYEAR", "DATE", "YEAR", "FORMAT")


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's real config file and HOWOLDAMI_* variables out of tests.

    Points ``HOWOLDAMI_CONFIG`` at a file that does not exist; tests that
    need a config file use :func:`write_config` or ``--config``.
    """
    for key in _ENV_KEYS:
        monkeypatch.delenv(f"HOWOLDAMI_{key}", raising=False)
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing" / "config.toml"))


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("howoldami")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper that writes ``config.toml`` contents and returns its path."""

    def _write(contents: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(contents, encoding="utf-8")
        return path

    return _write
