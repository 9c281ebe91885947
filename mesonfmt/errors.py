"""
Error types shared across the checker.

Every fatal condition of a run is a ``MesonFormatCheckError``. Files that
fail the format check are not errors; they are recorded in the run result.
"""

from typing import Optional


class MesonFormatCheckError(Exception):
    """Base class for fatal run errors."""
    pass


class UnsupportedPlatformError(MesonFormatCheckError):
    """The run was started on a platform other than Linux."""
    pass


class ToolNotFoundError(MesonFormatCheckError):
    """A required executable is not on PATH."""

    def __init__(self, executable: str):
        super().__init__(
            f"Unable to locate executable file: {executable}. Please verify either "
            f"the file path exists or the file can be found within a directory "
            f"specified by the PATH environment variable."
        )
        self.executable = executable


class ToolExecutionError(MesonFormatCheckError):
    """An external discovery tool failed."""

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        self.exit_code = exit_code


class SummaryError(MesonFormatCheckError):
    """The step summary could not be written."""
    pass
