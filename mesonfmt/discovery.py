"""
Meson File Discovery

Lists Meson build files in the working tree with either ``git ls-files``
or ``find``.
"""

import shutil
import subprocess
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .actions import ActionsLog
from .config.loader import resolve_file_path
from .config.models import CheckerConfig
from .errors import ToolExecutionError, ToolNotFoundError


MESON_FILE_NAMES = ("meson.build", "meson.options", "meson_options.txt")


class DiscoveryStrategy(str, Enum):
    """How candidate files are listed."""
    GIT = "git"
    FIND = "find"

    @classmethod
    def for_config(cls, config: CheckerConfig) -> "DiscoveryStrategy":
        return cls.GIT if config.only_git_files else cls.FIND


def git_command() -> List[str]:
    """
    Build the ``git ls-files`` invocation.

    ``--exclude`` together with ``--ignored -c`` turns the exclude patterns
    into an include filter over tracked files.
    """
    args = ["git", "ls-files"]
    for name in MESON_FILE_NAMES:
        args.extend(["--exclude", name])
    args.extend(["--ignored", "-c"])
    return args


def find_command() -> List[str]:
    """Build the ``find`` invocation matching any of the Meson file names."""
    expression: List[str] = []
    for index, name in enumerate(MESON_FILE_NAMES):
        if index != 0:
            expression.append("-o")
        expression.extend(["-name", name])
    return ["find", ".", "(", *expression, ")"]


def require_tool(executable: str) -> str:
    """Return the full path of a tool or raise ToolNotFoundError."""
    path = shutil.which(executable)
    if path is None:
        raise ToolNotFoundError(executable)
    return path


def run_and_capture(
    command: List[str],
    cwd: Path,
    log: Optional[ActionsLog] = None,
) -> List[str]:
    """
    Run a discovery tool and return its stdout lines.

    Args:
        command: Executable followed by its arguments
        cwd: Directory to run in
        log: Optional log for the command echo

    Returns:
        Non-empty stdout lines in emission order

    Raises:
        ToolNotFoundError: If the executable is not on PATH
        ToolExecutionError: On a non-zero exit or any stderr output
    """
    executable = command[0]
    require_tool(executable)

    if log:
        log.debug(f"[command]{' '.join(command)}")

    result = subprocess.run(
        command,
        cwd=cwd,
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        message = f"{executable} exited with exit code {result.returncode}"
        stderr = (result.stderr or "").strip()
        if stderr:
            message += f": {stderr.splitlines()[0]}"
        raise ToolExecutionError(message, exit_code=result.returncode)

    if result.stderr:
        raise ToolExecutionError(
            f"{executable} failed because one or more lines were written to the "
            f"STDERR stream (exit code {result.returncode}): {result.stderr.strip()}",
            exit_code=result.returncode,
        )

    return [line for line in result.stdout.split("\n") if line]


def discover_files(config: CheckerConfig, log: Optional[ActionsLog] = None) -> List[Path]:
    """
    Find all Meson build files below the working directory.

    Candidates that no longer exist are skipped wherever they appear in
    the tool output.

    Args:
        config: Resolved run configuration
        log: Optional log for skipped candidates

    Returns:
        Absolute paths in the order the tool listed them
    """
    strategy = DiscoveryStrategy.for_config(config)
    command = git_command() if strategy == DiscoveryStrategy.GIT else find_command()

    candidates = run_and_capture(command, config.working_directory, log)

    files: List[Path] = []
    for candidate in candidates:
        resolved = resolve_file_path(candidate, config.working_directory)
        if resolved is None:
            if log:
                log.warning(f"Skipping '{candidate}': file does not exist")
            continue
        files.append(resolved)

    return files
