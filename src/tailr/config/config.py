"""Configuration management for tailr."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from tailr.config.paths import default_config_path
from tailr.platform.logging import logger

DEFAULT_LINE_SPEC: Final[str] = "10"
READ_BLOCK_SIZE_DEFAULT: Final[int] = 64 * 1024
SPOOL_MAX_SIZE_DEFAULT: Final[int] = 8 * 1024 * 1024


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is malformed."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Rotating log file; console-only logging when unset
    log_file: Path | None = _path_field()

    # Count used when neither -n nor -c is given
    lines: str = DEFAULT_LINE_SPEC

    # Chunk size for the count and emit passes
    read_block_size: int = READ_BLOCK_SIZE_DEFAULT

    # Bytes of standard input kept in memory before spooling to disk
    spool_max_size: int = SPOOL_MAX_SIZE_DEFAULT

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from the TOML file, falling back to defaults.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but cannot be parsed.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Failed to load configuration from {config_file}: {e}") from e

            instance = cls(**cls._validate(config_dict, config_file))
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        return instance

    @classmethod
    def _validate(cls, raw: dict[str, Any], source: Path) -> dict[str, Any]:
        """Keep known keys and check their value types."""

        expected: dict[str, tuple[type, ...]] = {
            "log_file": (str,),
            "lines": (str, int),
            "read_block_size": (int,),
            "spool_max_size": (int,),
        }
        values: dict[str, Any] = {}
        for key, value in raw.items():
            if key not in expected:
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)
                continue
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, expected[key]):
                raise ConfigError(
                    f"Invalid value for '{key}' in {source}: {value!r}"
                )
            values[key] = str(value) if key == "lines" else value
        return values


__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_LINE_SPEC",
    "READ_BLOCK_SIZE_DEFAULT",
    "SPOOL_MAX_SIZE_DEFAULT",
]
