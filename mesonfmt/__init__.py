"""
Meson Format Check

Finds Meson build files in a working tree, runs ``meson format`` on each
in check-only mode and reports the ones that are not formatted.
"""

__version__ = "1.0.0"

from .errors import (
    MesonFormatCheckError,
    SummaryError,
    ToolExecutionError,
    ToolNotFoundError,
    UnsupportedPlatformError,
)
from .config import CheckerConfig, ConfigError, ConfigLoader
from .models import CheckResult, CheckRun, RunStatus
from .checker import FormatChecker

__all__ = [
    "__version__",
    "MesonFormatCheckError",
    "UnsupportedPlatformError",
    "ToolNotFoundError",
    "ToolExecutionError",
    "SummaryError",
    "CheckerConfig",
    "ConfigError",
    "ConfigLoader",
    "CheckResult",
    "CheckRun",
    "RunStatus",
    "FormatChecker",
]
