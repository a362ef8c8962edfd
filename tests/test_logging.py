from __future__ import annotations

import pytest

from terminal174.utils.logging import LEVELS, Logger


def test_errors_and_warnings_go_to_stderr(capsys):
    log = Logger()
    log.error("boom")
    log.warning("careful")
    log.system("ready")

    captured = capsys.readouterr()
    assert "[Error]: " in captured.err and "boom" in captured.err
    assert "[Warning]: " in captured.err and "careful" in captured.err
    assert "ready" in captured.out and "ready" not in captured.err


def test_debug_is_silent_until_enabled(capsys):
    log = Logger()
    log.debug("hidden")
    assert capsys.readouterr().out == ""

    log.set_debug(True)
    log.debug("shown")
    assert "[Debug]: " in capsys.readouterr().out


def test_continuation_lines_are_indented_under_the_first(capsys):
    Logger().model("first\nsecond")

    first, second = capsys.readouterr().out.splitlines()
    prefix_end = first.index("]: ") + len("]: ")
    assert "second" in second
    assert second.index("second") >= prefix_end


def test_unknown_level_is_rejected():
    assert "Trace" not in LEVELS
    with pytest.raises(KeyError):
        Logger().log_message("Trace", "nope")
