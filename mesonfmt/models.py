"""
Check Models

Result types produced by the check loop.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List

from .config.models import CheckerConfig


class RunStatus(str, Enum):
    """Outcome of a whole run."""
    PASSED = "passed"
    FILES_NOT_FORMATTED = "files_not_formatted"


@dataclass(frozen=True)
class CheckResult:
    """Result of checking a single file."""
    file: Path
    is_formatted: bool


@dataclass
class CheckRun:
    """
    Complete check results, in discovery order.

    A run with unformatted files is a normal outcome, not an exception;
    the caller turns it into a failing exit status.
    """
    config: CheckerConfig
    results: List[CheckResult] = field(default_factory=list)

    @property
    def failing_files(self) -> List[Path]:
        """Files that failed the check, in the order they were checked."""
        return [r.file for r in self.results if not r.is_formatted]

    @property
    def status(self) -> RunStatus:
        if self.failing_files:
            return RunStatus.FILES_NOT_FORMATTED
        return RunStatus.PASSED

    @property
    def passed(self) -> bool:
        return self.status == RunStatus.PASSED

    def summary(self) -> str:
        """Get summary string."""
        total = len(self.results)
        failed = len(self.failing_files)

        status = "PASSED" if self.passed else "FAILED"
        return f"{status}: {total - failed}/{total} files formatted correctly"
