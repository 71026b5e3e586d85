"""Locate the nowctl.toml that settings are read from.

Lookup order:
  1. ``NOWCTL_CONFIG`` env var (an explicit file; missing means no config)
  2. A project file: ``nowctl.toml`` in the working directory or a parent
  3. The user file: ``$XDG_CONFIG_HOME/nowctl/nowctl.toml``
     (``~/.config/nowctl/nowctl.toml`` when XDG_CONFIG_HOME is unset),
     where the API token usually lives
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "nowctl.toml"
CONFIG_ENV_VAR = "NOWCTL_CONFIG"


def user_config_path() -> Path:
    """Path of the per-user config file (it may not exist)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "nowctl" / CONFIG_FILENAME


def find_project_config(start: Path | None = None) -> Path | None:
    """Return the nearest nowctl.toml at or above *start* (default: cwd)."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Resolve the config file to load, or None to run on env and defaults."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    project = find_project_config(start)
    if project is not None:
        return project

    user = user_config_path()
    return user if user.is_file() else None
