from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from terminal174.commands import CommandExecutor, CommandResult, build_shell_argv

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="uses sh syntax")


@posix_only
def test_two_lines_and_clean_exit(capsys):
    result = CommandExecutor().execute("echo first; echo second")

    assert result.combined_output == "first\nsecond\n"
    assert result.exit_code == 0
    assert result.success
    assert capsys.readouterr().out.splitlines()[-2:] == ["first", "second"]


@posix_only
def test_non_zero_exit_is_annotated_not_raised():
    result = CommandExecutor().execute("echo partial; exit 3")

    assert result.exit_code == 3
    assert not result.success
    assert result.combined_output == "partial\n\nProcess exited with code: 3"


@posix_only
def test_stderr_section_follows_stdout_section(capsys):
    result = CommandExecutor().execute("echo oops 1>&2; echo fine")

    assert result.combined_output == "fine\noops\n"
    captured = capsys.readouterr()
    assert "oops" in captured.err
    assert "oops" not in captured.out


@posix_only
def test_large_stderr_does_not_block_stdout():
    # Well past a pipe buffer on stderr before stdout writes anything
    result = CommandExecutor().execute(
        "i=0; while [ $i -lt 20000 ]; do echo err-line-$i 1>&2; i=$((i+1)); done; echo done"
    )

    assert result.stdout_lines == ["done"]
    assert len(result.stderr_lines) == 20000
    assert result.exit_code == 0


def test_spawn_failure_raises_os_error():
    with patch("terminal174.commands.executor.subprocess.Popen", side_effect=FileNotFoundError("sh")):
        with pytest.raises(OSError):
            CommandExecutor().execute("echo hi")


def test_platform_shell_selection():
    with patch("terminal174.commands.executor.sys.platform", "win32"):
        assert build_shell_argv("dir") == ["cmd", "/C", "dir"]
    with patch("terminal174.commands.executor.sys.platform", "linux"):
        assert build_shell_argv("ls -la") == ["sh", "-c", "ls -la"]


def test_signal_terminated_process_has_no_annotation():
    result = CommandResult("sleep 100", stdout_lines=["started"], exit_code=None)
    assert result.combined_output == "started\n"
