"""
Job Summary

Builds the Markdown/HTML document GitHub renders on the job page and
writes it to the file named by ``GITHUB_STEP_SUMMARY``.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Union

from .errors import SummaryError


SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"


def wrap(tag: str, content: Optional[str] = None, attrs: Optional[Dict[str, str]] = None) -> str:
    """Render ``<tag attrs>content</tag>``, or a bare ``<tag>`` without content."""
    html_attrs = "".join(f' {key}="{value}"' for key, value in (attrs or {}).items())
    if content is None:
        return f"<{tag}{html_attrs}>"
    return f"<{tag}{html_attrs}>{content}</{tag}>"


class Summary:
    """
    Buffered job summary.

    Builder methods return ``self`` so calls can be chained. Nothing
    touches the disk until ``write`` is called.
    """

    def __init__(self, file_path: Optional[Union[str, Path]] = None):
        """
        Args:
            file_path: Target file; defaults to $GITHUB_STEP_SUMMARY
        """
        if file_path is None:
            file_path = os.environ.get(SUMMARY_ENV_VAR) or None
        self.file_path = Path(file_path) if file_path else None
        self._buffer = ""

    @property
    def has_target(self) -> bool:
        return self.file_path is not None

    def stringify(self) -> str:
        return self._buffer

    def is_empty_buffer(self) -> bool:
        return len(self._buffer) == 0

    def clear(self) -> "Summary":
        """Drop everything buffered so far."""
        self._buffer = ""
        return self

    def add_raw(self, text: str, add_eol: bool = False) -> "Summary":
        self._buffer += text
        return self.add_eol() if add_eol else self

    def add_eol(self) -> "Summary":
        return self.add_raw(os.linesep)

    def add_heading(self, text: str, level: int = 1) -> "Summary":
        tag = f"h{level}" if 1 <= level <= 6 else "h1"
        return self.add_raw(wrap(tag, text)).add_eol()

    def add_break(self) -> "Summary":
        return self.add_raw(wrap("br")).add_eol()

    def add_separator(self) -> "Summary":
        return self.add_raw(wrap("hr")).add_eol()

    def add_details(self, label: str, content: str) -> "Summary":
        """Add a collapsible section."""
        return self.add_raw(wrap("details", wrap("summary", label) + content)).add_eol()

    def add_code_block(self, code: str, lang: Optional[str] = None) -> "Summary":
        attrs = {"lang": lang} if lang else None
        return self.add_raw(wrap("pre", wrap("code", code), attrs)).add_eol()

    def write(self, overwrite: bool = False) -> "Summary":
        """
        Flush the buffer to the summary file and empty it.

        Args:
            overwrite: Replace the file contents instead of appending

        Raises:
            SummaryError: If no summary file is configured or it cannot be written
        """
        if self.file_path is None:
            raise SummaryError(
                f"Unable to find environment variable for ${SUMMARY_ENV_VAR}. "
                f"Check if your runtime environment supports job summaries."
            )

        mode = "w" if overwrite else "a"
        try:
            with open(self.file_path, mode, encoding="utf-8") as f:
                f.write(self._buffer)
        except OSError as e:
            raise SummaryError(
                f"Unable to access summary file: '{self.file_path}'. "
                f"Check if the file has correct read/write permissions. ({e})"
            )

        return self.clear()
