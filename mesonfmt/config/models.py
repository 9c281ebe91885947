"""
Pydantic models for configuration validation.

``CheckerConfig`` is the resolved, immutable configuration of a run.
``SettingsFile`` is the schema of the optional YAML settings file.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SettingsFile(BaseModel):
    """
    Optional YAML settings file.

    Keys use the same names as the action inputs::

        format-file: meson.format
        only-git-files: true
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    format_file: str = Field(default="", alias="format-file", description="Path to a meson format config")
    only_git_files: bool = Field(default=False, alias="only-git-files", description="Use git to list files")

    @field_validator("format_file", mode="before")
    @classmethod
    def none_to_empty(cls, v: Optional[str]) -> str:
        """An empty YAML value means no format file."""
        return "" if v is None else v


class CheckerConfig(BaseModel):
    """
    Resolved configuration for a single run.

    Built once at startup by ``ConfigLoader`` and passed explicitly to
    discovery, the check loop and reporting.
    """

    model_config = ConfigDict(frozen=True)

    working_directory: Path = Field(..., description="Directory the run operates in")
    format_file: Optional[Path] = Field(None, description="Resolved meson format config file")
    only_git_files: bool = Field(default=False, description="Discover files with git instead of find")

    @field_validator("working_directory")
    @classmethod
    def validate_working_directory(cls, v: Path) -> Path:
        """Working directory must be an existing absolute directory."""
        if not v.is_absolute():
            raise ValueError(f"Working directory must be absolute: {v}")
        if not v.is_dir():
            raise ValueError(f"Working directory does not exist: {v}")
        return v

    @model_validator(mode="after")
    def validate_format_file(self):
        """A configured format file must already be resolved."""
        if self.format_file is not None:
            if not self.format_file.is_absolute():
                raise ValueError(f"Format file must be resolved to an absolute path: {self.format_file}")
            if not self.format_file.exists():
                raise ValueError(f"Format file does not exist: {self.format_file}")
        return self
