"""
Format Checker

Main orchestrator: discovery, the per-file check loop and reporting.
"""

import sys
from pathlib import Path
from typing import List, Optional

from .actions import ActionsLog
from .config.models import CheckerConfig
from .discovery import discover_files
from .errors import UnsupportedPlatformError
from .formatter import check_file, require_meson
from .models import CheckResult, CheckRun
from .report import build_report, write_report
from .summary import Summary


SUPPORTED_PLATFORM = "linux"


def ensure_supported_platform(platform_name: Optional[str] = None) -> None:
    """
    Refuse to run anywhere but Linux.

    Raises:
        UnsupportedPlatformError: On any other platform
    """
    name = platform_name if platform_name is not None else sys.platform
    if name != SUPPORTED_PLATFORM:
        raise UnsupportedPlatformError(
            f"Action atm only supported on {SUPPORTED_PLATFORM}: but are on: {name}"
        )


class FormatChecker:
    """
    Checks every Meson file of a working tree.

    Files are checked one at a time in discovery order; a file that fails
    the check is recorded and the loop moves on.
    """

    def __init__(self, config: CheckerConfig, log: Optional[ActionsLog] = None):
        """
        Initialize the checker.

        Args:
            config: Resolved run configuration
            log: Log surface, a default console log if omitted
        """
        self.config = config
        self.log = log or ActionsLog()

    def discover(self) -> List[Path]:
        """List the Meson files to check."""
        return discover_files(self.config, self.log)

    def check(self, file: Path) -> CheckResult:
        """Check one file and log the outcome."""
        self.log.info(f"Checking file: '{file}'")

        is_formatted = check_file(file, self.config.format_file)

        self.log.info("File is formatted correctly" if is_formatted else "File has formatting errors")
        self.log.info("")

        if not is_formatted:
            self.log.error(
                "File not formatted correctly",
                file=file,
                title="File not formatted correctly",
            )

        return CheckResult(file=file, is_formatted=is_formatted)

    def run(self, files: Optional[List[Path]] = None) -> CheckRun:
        """
        Run the check loop.

        Args:
            files: Files to check; discovered when omitted

        Returns:
            CheckRun with one result per file, in order
        """
        if files is None:
            files = self.discover()

        require_meson()

        run = CheckRun(config=self.config)
        with self.log.group("Check all files"):
            for file in files:
                run.results.append(self.check(file))

        return run


def run_check(config: CheckerConfig, log: ActionsLog, summary: Summary) -> CheckRun:
    """
    Run a full check and write the job summary.

    When the summary has no target file, the rendered report is printed
    to the log console instead.

    Returns:
        The finished CheckRun; the caller maps failures to an exit status
    """
    checker = FormatChecker(config, log)
    run = checker.run()

    if summary.has_target:
        write_report(run, summary)
    else:
        build_report(run, summary)
        log.console.print(summary.stringify(), markup=False, highlight=False, emoji=False, soft_wrap=True)
        summary.clear()

    return run
