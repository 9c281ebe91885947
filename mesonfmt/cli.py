"""
Command-line interface for the Meson format check.

``check`` is what the GitHub Action runs; ``discover`` previews the files
a check would look at.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .actions import ActionsLog, get_boolean_input, get_input
from .checker import FormatChecker, ensure_supported_platform, run_check
from .config import ConfigLoader
from .errors import MesonFormatCheckError
from .paths import to_relative_path
from .summary import Summary

console = Console()

NOT_FORMATTED_MESSAGE = "Some files are not formatted correctly"


def _input_flag(name: str) -> Optional[bool]:
    """Boolean action input, or None when the input is not set."""
    if not get_input(name):
        return None
    return get_boolean_input(name)


def _input_path(name: str) -> Optional[str]:
    """Path action input, or None when the input is not set."""
    return get_input(name) or None


def _load_config(directory: str, settings: Optional[str], format_file: Optional[str], only_git_files: Optional[bool]):
    if only_git_files is None:
        only_git_files = _input_flag("only-git-files")

    loader = ConfigLoader(working_directory=directory, settings_path=settings)
    return loader.load(format_file=format_file, only_git_files=only_git_files)


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="mesonfmt-check")
def cli():
    """
    Meson Format Check

    Verify that meson.build, meson.options and meson_options.txt files
    are formatted according to `meson format`.
    """


# ============================================================
# CHECK Command
# ============================================================

@cli.command()
@click.option(
    "--format-file",
    "-c",
    type=str,
    default=None,
    help="Meson format config file (or set INPUT_FORMAT-FILE)",
)
@click.option(
    "--only-git-files/--all-files",
    default=None,
    help="List files with git instead of find (or set INPUT_ONLY-GIT-FILES)",
)
@click.option("--settings", "-s", type=click.Path(exists=True, dir_okay=False), help="YAML settings file")
@click.option(
    "--summary-file",
    type=click.Path(dir_okay=False),
    envvar="GITHUB_STEP_SUMMARY",
    help="Job summary file (or set GITHUB_STEP_SUMMARY)",
)
@click.option(
    "--directory",
    "-C",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Working directory to check",
)
@click.option("--verbose", "-v", is_flag=True, help="Show the commands being run")
def check(
    format_file: Optional[str],
    only_git_files: Optional[bool],
    settings: Optional[str],
    summary_file: Optional[str],
    directory: str,
    verbose: bool,
):
    """Check that all Meson files are formatted."""
    log = ActionsLog(console=console, verbose=verbose)

    try:
        ensure_supported_platform()

        format_file = format_file.strip() if format_file is not None else _input_path("format-file")
        config = _load_config(directory, settings, format_file, only_git_files)
        run = run_check(config, log, Summary(summary_file))
    except MesonFormatCheckError as e:
        log.set_failed(str(e))
        sys.exit(1)
    except Exception as e:
        log.set_failed(f"Unexpected error: {e!r}")
        sys.exit(1)

    if not run.passed:
        log.set_failed(NOT_FORMATTED_MESSAGE)
        sys.exit(1)

    log.info(run.summary())


# ============================================================
# DISCOVER Command
# ============================================================

@cli.command()
@click.option("--only-git-files/--all-files", default=None, help="List files with git instead of find")
@click.option("--settings", "-s", type=click.Path(exists=True, dir_okay=False), help="YAML settings file")
@click.option(
    "--directory",
    "-C",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Working directory to search",
)
def discover(only_git_files: Optional[bool], settings: Optional[str], directory: str):
    """List the Meson files a check would look at."""
    log = ActionsLog(console=console)

    try:
        ensure_supported_platform()

        config = _load_config(directory, settings, None, only_git_files)
        files = FormatChecker(config, log).discover()
    except MesonFormatCheckError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title=f"Meson files in {config.working_directory}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("File", style="cyan")

    for index, file in enumerate(files, start=1):
        table.add_row(str(index), to_relative_path(file, config.working_directory))

    console.print(table)
    console.print(f"\n[bold]{len(files)}[/bold] file(s) found using [cyan]{'git' if config.only_git_files else 'find'}[/cyan]")


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    cli()
