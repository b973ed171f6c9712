"""Configuration loading and derived runtime settings."""

from tailr.config.config import Config, ConfigError
from tailr.config.settings import RuntimeSettings, runtime_settings

__all__ = ["Config", "ConfigError", "RuntimeSettings", "runtime_settings"]
