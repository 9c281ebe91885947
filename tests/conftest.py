"""Shared test fixtures for the format checker tests."""

import io
import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Set

import pytest
from rich.console import Console

from mesonfmt.actions import ActionsLog
from mesonfmt.config import CheckerConfig


class FakeProcesses:
    """
    Stand-in for ``subprocess.run``.

    Discovery tools (git, find) print ``listing``; ``meson format`` fails
    for every file in ``unformatted``.
    """

    def __init__(self):
        self.calls: List[List[str]] = []
        self.kwargs: List[Dict] = []
        self.listing: Dict[str, str] = {"git": "", "find": ""}
        self.stderr = ""
        self.returncode = 0
        self.unformatted: Set[str] = set()

    def __call__(self, args, **kwargs):
        args = [str(a) for a in args]
        self.calls.append(args)
        self.kwargs.append(kwargs)

        if args[0] in self.listing:
            return subprocess.CompletedProcess(
                args, self.returncode, stdout=self.listing[args[0]], stderr=self.stderr
            )

        if args[0] == "meson":
            return subprocess.CompletedProcess(args, 1 if args[-1] in self.unformatted else 0)

        raise AssertionError(f"Unexpected command: {args}")

    def commands(self, executable: str) -> List[List[str]]:
        return [c for c in self.calls if c[0] == executable]


@pytest.fixture
def processes(monkeypatch) -> FakeProcesses:
    """Replace subprocess.run and make every tool look installed."""
    fake = FakeProcesses()
    monkeypatch.setattr(subprocess, "run", fake)
    monkeypatch.setattr(shutil, "which", lambda name: f"/usr/bin/{name}")
    return fake


@pytest.fixture
def clean_env(monkeypatch):
    """Remove runner variables that would leak into the run."""
    for name in (
        "GITHUB_ACTIONS",
        "GITHUB_STEP_SUMMARY",
        "RUNNER_DEBUG",
        "INPUT_FORMAT-FILE",
        "INPUT_ONLY-GIT-FILES",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def repo(tmp_path) -> Path:
    """A small tree of Meson files."""
    (tmp_path / "meson.build").write_text("project('demo')\n")
    (tmp_path / "meson.options").write_text("option('x', type: 'boolean')\n")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "meson.build").write_text("subdir_done()\n")
    return tmp_path


@pytest.fixture
def config(repo) -> CheckerConfig:
    return CheckerConfig(working_directory=repo)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def log(output) -> ActionsLog:
    """Log that writes workflow commands into ``output``."""
    console = Console(file=output, width=200, color_system=None)
    return ActionsLog(console=console, github_actions=True)
