"""Config file discovery and loading.

The config file lives in the platform's per-user config directory
(``~/.config/howoldami/config.toml`` on Linux).  The ``HOWOLDAMI_CONFIG``
env var and the ``--config`` CLI flag point somewhere else.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from howoldami.config.models import ConfigFile

APP_NAME = "howoldami"
CONFIG_FILENAME = "config.toml"
CONFIG_ENV_VAR = "HOWOLDAMI_CONFIG"


def config_dir() -> Path:
    """Per-user config directory for howoldami."""
    return Path(click.get_app_dir(APP_NAME))


def find_config(explicit: str | Path | None = None) -> Path:
    """Return the config file path to try.

    Precedence: *explicit* path, then ``HOWOLDAMI_CONFIG``, then
    ``config.toml`` in :func:`config_dir`.  The file may not exist.
    """
    if explicit:
        return Path(explicit)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return config_dir() / CONFIG_FILENAME


def load_config(path: Path) -> ConfigFile:
    """Load and validate *path*.

    Raises:
        OSError: The file is missing or unreadable.
        UnicodeDecodeError: The file is not UTF-8.
        tomllib.TOMLDecodeError: The file is not valid TOML.
        pydantic.ValidationError: The file has invalid values.
    """
    raw = path.read_text(encoding="utf-8")
    data: dict[str, Any] = tomllib.loads(raw)
    return ConfigFile.model_validate(data)
