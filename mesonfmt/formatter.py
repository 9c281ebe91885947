"""
Meson Formatter

Runs ``meson format`` in check-only mode and renders the in-place fix
command shown to users.
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from .discovery import require_tool
from .paths import to_relative_path


MESON = "meson"


def require_meson() -> str:
    """Return the path of ``meson`` or raise ToolNotFoundError."""
    return require_tool(MESON)


def config_args(format_file: Optional[Path]) -> List[str]:
    return [] if format_file is None else ["-c", str(format_file)]


def check_command(file: Path, format_file: Optional[Path] = None) -> List[str]:
    return [MESON, "format", "--check-only", *config_args(format_file), str(file)]


def check_file(file: Path, format_file: Optional[Path] = None) -> bool:
    """
    Check whether a file is formatted.

    Any non-zero exit status counts as not formatted, including errors
    inside meson itself. Output streams straight to the job log.

    Args:
        file: Absolute path of the file
        format_file: Optional meson format config

    Returns:
        True if meson reported the file as formatted
    """
    result = subprocess.run(check_command(file, format_file))
    return result.returncode == 0


def fix_command(files: Sequence[Path], format_file: Optional[Path], cwd: Path) -> str:
    """
    Render the command that formats ``files`` in place.

    Paths are relative to ``cwd`` and double-quoted, e.g.
    ``meson format -c "fmt.ini" -i "sub/meson.build" "meson.options"``.
    """
    parts = [MESON, "format"]
    if format_file is not None:
        parts.append(f'-c "{to_relative_path(format_file, cwd)}"')
    parts.append("-i")
    parts.extend(f'"{to_relative_path(file, cwd)}"' for file in files)
    return " ".join(parts)
