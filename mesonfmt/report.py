"""
Run Report

Renders the job summary for a finished check run.
"""

from typing import Sequence

from .formatter import fix_command
from .models import CheckRun
from .paths import to_relative_path
from .summary import Summary


SUCCESS_LINE = ":white_check_mark: All files are correctly formatted"
FAILURE_LINE = ":x: Some files are not formatted correctly"
FIX_HINT = "To format the files run the following command"


def markdown_list(items: Sequence[str], ordered: bool) -> str:
    """
    Render items as an HTML list, e.g. ``<ul><li>a</li><li>b</li></ul>``.

    Items are inserted as-is.
    """
    content = "".join(f"<li>{item}</li>" for item in items)
    list_type = "ol" if ordered else "ul"
    return f"<{list_type}>{content}</{list_type}>"


def build_report(run: CheckRun, summary: Summary) -> Summary:
    """
    Fill ``summary`` with the result of ``run``.

    The buffer is cleared first; the caller writes it.
    """
    summary.clear()
    summary.add_heading("Result", 1)

    if run.passed:
        return summary.add_raw(SUCCESS_LINE, True)

    cwd = run.config.working_directory
    failing = run.failing_files

    summary.add_raw(FAILURE_LINE, True)
    summary.add_break()
    summary.add_details(
        "Affected Files",
        markdown_list([to_relative_path(file, cwd) for file in failing], False),
    )
    summary.add_separator()
    summary.add_raw(FIX_HINT, True)
    summary.add_break()
    summary.add_code_block(fix_command(failing, run.config.format_file, cwd), "bash")

    return summary


def write_report(run: CheckRun, summary: Summary) -> Summary:
    """Render the report and overwrite the summary file with it."""
    return build_report(run, summary).write(overwrite=True)
