"""Path helpers."""

import os
from pathlib import Path
from typing import Union


def to_relative_path(file: Union[str, Path], cwd: Path) -> str:
    """Make an absolute path relative to ``cwd``; relative paths pass through."""
    if not os.path.isabs(file):
        return str(file)
    return os.path.relpath(file, cwd)
