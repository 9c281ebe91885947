"""Tests for the check loop, platform gate and run orchestration."""

import shutil

import pytest

from mesonfmt.checker import FormatChecker, ensure_supported_platform, run_check
from mesonfmt.config import CheckerConfig
from mesonfmt.errors import ToolNotFoundError, UnsupportedPlatformError
from mesonfmt.models import RunStatus
from mesonfmt.summary import Summary


def test_linux_is_supported():
    ensure_supported_platform("linux")


@pytest.mark.parametrize("name", ["darwin", "win32", "cygwin", "freebsd13"])
def test_other_platforms_rejected(name):
    with pytest.raises(UnsupportedPlatformError) as exc:
        ensure_supported_platform(name)
    assert str(exc.value) == f"Action atm only supported on linux: but are on: {name}"


def test_run_checks_in_discovery_order(processes, config, repo, log):
    processes.listing["find"] = "./sub/meson.build\n./meson.build\n./meson.options\n"

    run = FormatChecker(config, log).run()

    checked = [c[-1] for c in processes.commands("meson")]
    assert checked == [str(repo / "sub" / "meson.build"), str(repo / "meson.build"), str(repo / "meson.options")]
    assert [r.file for r in run.results] == [repo / "sub" / "meson.build", repo / "meson.build", repo / "meson.options"]


def test_failing_files_are_exact_subset_in_order(processes, config, repo, log):
    processes.listing["find"] = "./sub/meson.build\n./meson.build\n./meson.options\n"
    processes.unformatted = {str(repo / "meson.options"), str(repo / "sub" / "meson.build")}

    run = FormatChecker(config, log).run()

    assert run.failing_files == [repo / "sub" / "meson.build", repo / "meson.options"]
    assert run.status == RunStatus.FILES_NOT_FORMATTED
    assert not run.passed
    assert run.summary() == "FAILED: 1/3 files formatted correctly"


def test_all_formatted(processes, config, repo, log):
    processes.listing["find"] = "./meson.build\n"
    run = FormatChecker(config, log).run()
    assert run.passed
    assert run.status == RunStatus.PASSED
    assert run.failing_files == []


def test_format_file_passed_to_every_check(processes, repo, log):
    (repo / "fmt.ini").write_text("")
    config = CheckerConfig(working_directory=repo, format_file=repo / "fmt.ini")

    FormatChecker(config, log).run([repo / "meson.build", repo / "meson.options"])

    for command in processes.commands("meson"):
        assert command[3:5] == ["-c", str(repo / "fmt.ini")]


def test_log_output(processes, config, repo, log, output):
    processes.unformatted = {str(repo / "meson.build")}

    FormatChecker(config, log).run([repo / "meson.build", repo / "meson.options"])

    lines = output.getvalue().splitlines()
    assert lines[0] == "::group::Check all files"
    assert lines[1] == f"Checking file: '{repo / 'meson.build'}'"
    assert lines[2] == "File has formatting errors"
    assert lines[3] == ""
    assert lines[4].startswith("::error title=File not formatted correctly,file=")
    assert lines[4].endswith("::File not formatted correctly")
    assert lines[5] == f"Checking file: '{repo / 'meson.options'}'"
    assert lines[6] == "File is formatted correctly"
    assert lines[-1] == "::endgroup::"


def test_meson_missing_is_fatal(processes, monkeypatch, config, log):
    processes.listing["find"] = "./meson.build\n"
    monkeypatch.setattr(shutil, "which", lambda name: None if name == "meson" else f"/usr/bin/{name}")

    with pytest.raises(ToolNotFoundError):
        FormatChecker(config, log).run()
    assert processes.commands("meson") == []


def test_run_check_writes_summary(processes, config, repo, log, tmp_path):
    processes.listing["find"] = "./meson.build\n"
    processes.unformatted = {str(repo / "meson.build")}
    target = tmp_path / "summary.md"

    run = run_check(config, log, Summary(target))

    assert not run.passed
    assert "<ul><li>meson.build</li></ul>" in target.read_text()


def test_run_check_prints_summary_without_target(processes, config, log, output):
    run = run_check(config, log, Summary(file_path=None))
    assert run.passed
    assert ":white_check_mark: All files are correctly formatted" in output.getvalue()
