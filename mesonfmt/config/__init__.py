"""Configuration handling for the format checker."""

from .models import CheckerConfig, SettingsFile
from .loader import ConfigError, ConfigLoader, parse_boolean_input, resolve_file_path

__all__ = [
    "CheckerConfig",
    "SettingsFile",
    "ConfigError",
    "ConfigLoader",
    "parse_boolean_input",
    "resolve_file_path",
]
