"""Shared path utilities for configuration locations.

Policy:
- Config: ``$GIT_SLOTS_CONFIG`` when set, otherwise
  ``$XDG_CONFIG_HOME/git-slots/config.toml`` (``~/.config`` fallback).
- An explicit ``--config`` path always wins over both.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


ENV_CONFIG_PATH: Final[str] = "GIT_SLOTS_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
APP_DIR_NAME: Final[str] = "git-slots"
CONFIG_FILE_NAME: Final[str] = "config.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the per-user configuration directory."""

    mapping = env if env is not None else os.environ
    xdg_home = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return (base / APP_DIR_NAME).expanduser()


def default_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Get the TOML config path after applying overrides."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: default_config_dir(env) / CONFIG_FILE_NAME,
    )


__all__ = [
    "APP_DIR_NAME",
    "CONFIG_FILE_NAME",
    "ENV_CONFIG_PATH",
    "default_config_dir",
    "default_config_path",
    "resolve_overridable_path",
]
