"""Tests for meson format invocations and the rendered fix command."""

from pathlib import Path

from mesonfmt.formatter import check_command, check_file, fix_command


def test_check_command_without_config():
    assert check_command(Path("/repo/meson.build")) == [
        "meson", "format", "--check-only", "/repo/meson.build",
    ]


def test_check_command_with_config():
    assert check_command(Path("/repo/meson.build"), Path("/repo/fmt.ini")) == [
        "meson", "format", "--check-only", "-c", "/repo/fmt.ini", "/repo/meson.build",
    ]


def test_check_file_formatted(processes, repo):
    assert check_file(repo / "meson.build") is True


def test_check_file_not_formatted(processes, repo):
    processes.unformatted.add(str(repo / "meson.build"))
    assert check_file(repo / "meson.build") is False


def test_check_file_passes_config(processes, repo):
    check_file(repo / "meson.build", repo / "fmt.ini")
    assert processes.calls == [
        ["meson", "format", "--check-only", "-c", str(repo / "fmt.ini"), str(repo / "meson.build")]
    ]


def test_fix_command_without_config():
    files = [Path("/repo/sub/meson.build"), Path("/repo/meson.options")]
    assert fix_command(files, None, Path("/repo")) == 'meson format -i "sub/meson.build" "meson.options"'


def test_fix_command_with_config():
    files = [Path("/repo/sub/meson.build"), Path("/repo/meson.options")]
    assert (
        fix_command(files, Path("/repo/fmt.ini"), Path("/repo"))
        == 'meson format -c "fmt.ini" -i "sub/meson.build" "meson.options"'
    )


def test_fix_command_keeps_relative_paths():
    assert fix_command([Path("already/meson.build")], None, Path("/repo")) == (
        'meson format -i "already/meson.build"'
    )
