"""
GitHub Actions Log Surface

Reads action inputs and writes log lines. Inside a GitHub Actions runner
log lines become workflow commands (groups, annotations); anywhere else
they are rendered with rich.
"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

from rich.console import Console
from rich.markup import escape

from .config.loader import parse_boolean_input


def get_input(name: str) -> str:
    """
    Read an action input from the environment.

    The runner exposes input ``format-file`` as ``INPUT_FORMAT-FILE``.

    Args:
        name: Input name as declared in action.yml

    Returns:
        Stripped input value, empty string when unset
    """
    value = os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    return value


def get_boolean_input(name: str, default: bool = False) -> bool:
    """Read a boolean action input (``true | True | TRUE | false | False | FALSE``)."""
    return parse_boolean_input(name, get_input(name), default=default)


def running_in_actions() -> bool:
    """Check whether this process runs inside a GitHub Actions job."""
    return os.environ.get("GITHUB_ACTIONS") == "true"


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: str = "", properties: Optional[Dict[str, str]] = None) -> str:
    """
    Build a workflow command line.

    Example: ``::error file=meson.build,title=Bad::message``
    """
    line = f"::{command}"
    props = {k: v for k, v in (properties or {}).items() if v}
    if props:
        line += " " + ",".join(f"{k}={escape_property(str(v))}" for k, v in props.items())
    return f"{line}::{escape_data(message)}"


class ActionsLog:
    """
    Leveled log output for a run.

    Emits workflow commands when ``github_actions`` is true, otherwise
    styled console lines.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        github_actions: Optional[bool] = None,
        verbose: bool = False,
    ):
        self.console = console or Console()
        self.github_actions = running_in_actions() if github_actions is None else github_actions
        self.verbose = verbose or os.environ.get("RUNNER_DEBUG") == "1"

    def _plain(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(
            text,
            style=style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _command(self, command: str, message: str = "", properties: Optional[Dict[str, str]] = None) -> None:
        self._plain(format_command(command, message, properties))

    def start_group(self, name: str) -> None:
        if self.github_actions:
            self._command("group", name)
        else:
            self.console.rule(f"[bold blue]{escape(name)}[/bold blue]")

    def end_group(self) -> None:
        if self.github_actions:
            self._command("endgroup")
        else:
            self.console.rule(style="blue")

    @contextmanager
    def group(self, name: str) -> Iterator[None]:
        """Wrap log output in a collapsible group."""
        self.start_group(name)
        try:
            yield
        finally:
            self.end_group()

    def info(self, message: str) -> None:
        self._plain(message)

    def debug(self, message: str) -> None:
        if self.github_actions:
            self._command("debug", message)
        elif self.verbose:
            self._plain(message, style="dim")

    def warning(self, message: str, file: Optional[Union[str, Path]] = None, title: Optional[str] = None) -> None:
        if self.github_actions:
            self._command("warning", message, {"title": title, "file": file and str(file)})
        else:
            prefix = f"{file}: " if file else ""
            self._plain(f"Warning: {prefix}{message}", style="yellow")

    def error(
        self,
        message: str,
        file: Optional[Union[str, Path]] = None,
        title: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        """Log an error, annotated with a file location when given."""
        if self.github_actions:
            properties = {
                "title": title,
                "file": file and str(file),
                "line": line and str(line),
            }
            self._command("error", message, properties)
        else:
            prefix = f"{file}: " if file else ""
            self._plain(f"Error: {prefix}{message}", style="bold red")

    def set_failed(self, message: str) -> None:
        """Report the failure message. The caller decides the exit code."""
        self.error(message)
