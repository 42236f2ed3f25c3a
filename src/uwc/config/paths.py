"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers the locations of its
config and log files.

Policy:
- Config: ``$XDG_CONFIG_HOME/uwc/config.toml`` (``~/.config`` when unset),
  unless overridden by ``UWC_CONFIG``.
- Logs: never written by default; a log file is only used when configured.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "UWC_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_APP_DIR_NAME: Final[str] = "uwc"


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
    """Get the directory holding the user configuration.

    Args:
        env: Environment mapping to consult. Defaults to ``os.environ``.

    Returns:
        Path: ``$XDG_CONFIG_HOME/uwc`` or ``~/.config/uwc``.
    """
    mapping = env if env is not None else os.environ
    xdg_home = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return (base / _APP_DIR_NAME).expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file, honoring ``UWC_CONFIG``."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: default_config_dir(env) / "config.toml",
    )


__all__ = [
    "default_config_dir",
    "default_config_path",
    "resolve_overridable_path",
]
