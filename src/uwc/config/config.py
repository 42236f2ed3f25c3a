"""Configuration management for uwc."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from uwc.config.paths import default_config_path
from uwc.platform.logging import logger

CHUNK_SIZE_DEFAULT: Final[int] = 2048
BLOCK_SIZE_DEFAULT: Final[int] = 64 * 1024
ELASTIC_DEFAULT: Final[bool] = True


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration file {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


def _positive_field(default: int | None) -> Any:
    """Create an integer field that must stay strictly positive."""

    return field(default=default, metadata={"positive": True})


@dataclass
class Config:
    """Application configuration."""

    # Number of lines read before a parallel counting pass
    chunk_size: int = _positive_field(CHUNK_SIZE_DEFAULT)

    # Bytes requested from the input per read
    block_size: int = _positive_field(BLOCK_SIZE_DEFAULT)

    # Worker threads; None lets the executor pick
    jobs: int | None = _positive_field(None)

    # Align output columns
    elastic: bool = ELASTIC_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Coerce path fields and reset out-of-range integers to defaults.

        Uses the field metadata set by ``_path_field`` and ``_positive_field``
        so only intended fields are touched.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("path", False) and isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)
            elif f.metadata.get("positive", False) and value is not None:
                if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                    logger.warning(
                        "Ignoring invalid %s=%r in configuration; using %r",
                        f.name,
                        value,
                        f.default,
                    )
                    setattr(self, f.name, f.default)
        if not isinstance(self.elastic, bool):
            logger.warning("Ignoring invalid elastic=%r in configuration", self.elastic)
            self.elastic = ELASTIC_DEFAULT

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when no file exists.

        Raises:
            ConfigError: If the file exists but is unreadable or not valid TOML.
        """
        config_file = path if path is not None else default_config_path()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(config_file, str(e)) from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning(
                    "Ignoring unknown configuration keys in %s: %s",
                    config_file,
                    ", ".join(unknown),
                )
            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = [
    "BLOCK_SIZE_DEFAULT",
    "CHUNK_SIZE_DEFAULT",
    "ELASTIC_DEFAULT",
    "Config",
    "ConfigError",
]
