"""
Configuration loader.

Merges explicit values (command line options and action inputs) with an
optional YAML settings file and resolves the format file path.
"""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import MesonFormatCheckError
from .models import CheckerConfig, SettingsFile


TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


class ConfigError(MesonFormatCheckError):
    """Configuration loading or validation error."""
    pass


def resolve_file_path(file: Union[str, Path], cwd: Path) -> Optional[Path]:
    """
    Resolve a path against a working directory.

    Args:
        file: Absolute or relative path
        cwd: Directory relative paths are resolved against

    Returns:
        Normalized absolute path, or None if nothing exists there
    """
    path = Path(file)
    if not path.is_absolute():
        path = Path(os.path.normpath(cwd / path))

    if not path.exists():
        return None

    return path


def parse_boolean_input(name: str, value: str, default: bool = False) -> bool:
    """
    Parse a boolean action input.

    Follows the YAML 1.2 core schema like the GitHub Actions toolkit does.
    An empty value yields the default.
    """
    value = value.strip()
    if not value:
        return default
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigError(
        f'Input does not meet YAML 1.2 "Core Schema" specification: {name}\n'
        f"Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


class ConfigLoader:
    """
    Builds a ``CheckerConfig`` for one run.

    Explicit values win over the settings file, which wins over defaults.
    """

    def __init__(
        self,
        working_directory: Optional[Union[str, Path]] = None,
        settings_path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the config loader.

        Args:
            working_directory: Directory to check, defaults to the process cwd
            settings_path: Optional YAML settings file
        """
        self.working_directory = Path(os.path.abspath(working_directory or os.getcwd()))
        self.settings_path = Path(settings_path) if settings_path else None
        self._settings: Optional[SettingsFile] = None

    @property
    def settings(self) -> SettingsFile:
        """Settings file contents, or defaults when no file is configured."""
        if self._settings is None:
            self._settings = self._load_settings()
        return self._settings

    def _load_settings(self) -> SettingsFile:
        if self.settings_path is None:
            return SettingsFile()

        data = self._read_yaml(self.settings_path)
        try:
            return SettingsFile.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings file {self.settings_path}: {e}")

    def _read_yaml(self, file_path: Path) -> dict:
        """Read and parse a YAML file."""
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {file_path} must contain a mapping")
        return data

    def load(
        self,
        format_file: Optional[str] = None,
        only_git_files: Optional[bool] = None,
    ) -> CheckerConfig:
        """
        Resolve the configuration.

        Args:
            format_file: Format file path; None falls back to the settings file
            only_git_files: Discovery strategy; None falls back to the settings file

        Returns:
            Validated CheckerConfig

        Raises:
            ConfigError: If the format file does not exist or settings are invalid
        """
        raw_format_file = format_file if format_file is not None else self.settings.format_file
        if only_git_files is None:
            only_git_files = self.settings.only_git_files

        resolved = None
        if raw_format_file:
            resolved = resolve_file_path(raw_format_file, self.working_directory)
            if resolved is None:
                raise ConfigError(
                    f"Meson format file '{raw_format_file}' not found, please specify a valid file, "
                    f"current working directory, that was used to resolve this path was: "
                    f"{self.working_directory}"
                )

        try:
            return CheckerConfig(
                working_directory=self.working_directory,
                format_file=resolved,
                only_git_files=only_git_files,
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}")
