"""Where: src/tailr/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Hand validated values to feature layers without re-reading the TOML file.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tailr.config.config import (
    DEFAULT_LINE_SPEC,
    READ_BLOCK_SIZE_DEFAULT,
    SPOOL_MAX_SIZE_DEFAULT,
    Config,
)
from tailr.config.paths import default_log_dir


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Validated values consumed by the CLI and the extraction engine."""

    default_line_spec: str
    read_block_size: int
    spool_max_size: int
    log_file: Path | None


def runtime_settings(config: Config | None = None) -> RuntimeSettings:
    """Derive runtime settings, replacing out-of-range values with defaults."""

    app_config = config if config is not None else Config.load()

    line_spec = (app_config.lines or "").strip() or DEFAULT_LINE_SPEC

    block_size = app_config.read_block_size
    if block_size <= 0:
        block_size = READ_BLOCK_SIZE_DEFAULT

    # Zero is allowed: everything goes straight to disk.
    spool_max = app_config.spool_max_size
    if spool_max < 0:
        spool_max = SPOOL_MAX_SIZE_DEFAULT

    # Relative log paths live under the log directory.
    log_file = app_config.log_file
    if log_file is not None and not log_file.is_absolute():
        log_file = default_log_dir() / log_file

    return RuntimeSettings(
        default_line_spec=line_spec,
        read_block_size=block_size,
        spool_max_size=spool_max,
        log_file=log_file,
    )


__all__ = ["RuntimeSettings", "runtime_settings"]
