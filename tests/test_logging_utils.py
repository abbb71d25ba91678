import io

import pytest

from icon_metadata.utils import logging_utils
from icon_metadata.utils.logging_utils import Logger, color_text, should_use_color


class _TtyStream(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture(autouse=True)
def _color_allowed(monkeypatch):
    monkeypatch.setattr(logging_utils, "NO_COLOR", False)


def test_color_text():
    assert color_text("x", "red") == "\033[91mx\033[0m"
    assert color_text("x", "unknown") == "x\033[0m"


def test_should_use_color_modes():
    assert should_use_color(io.StringIO(), "always") is True
    assert should_use_color(_TtyStream(), "never") is False
    assert should_use_color(_TtyStream(), "auto") is True
    assert should_use_color(io.StringIO(), "AUTO") is False


def test_no_color_wins(monkeypatch):
    monkeypatch.setattr(logging_utils, "NO_COLOR", True)

    assert should_use_color(_TtyStream(), "always") is False


def test_unknown_color_mode_disables_color():
    assert should_use_color(_TtyStream(), "sometimes") is False


def test_info_goes_to_out_error_to_err():
    out, err = io.StringIO(), io.StringIO()
    logger = Logger(color_mode="never", out=out, err=err)

    logger.info("hello")
    logger.error("boom")

    assert out.getvalue() == "hello\n"
    assert err.getvalue() == "boom\n"
    assert logger.get_counts() == (1, 1)


def test_lines_are_colored_when_enabled():
    out, err = io.StringIO(), io.StringIO()
    logger = Logger(color_mode="always", out=out, err=err)

    logger.info("hello")
    logger.error("boom")

    assert out.getvalue() == f"{color_text('hello', 'green')}\n"
    assert err.getvalue() == f"{color_text('boom', 'red')}\n"


def test_auto_colors_only_terminals():
    tty, plain = _TtyStream(), io.StringIO()
    logger = Logger(color_mode="auto", out=tty, err=plain)

    logger.info("hello")
    logger.error("boom")

    assert tty.getvalue() == f"{color_text('hello', 'green')}\n"
    assert plain.getvalue() == "boom\n"


def test_default_streams_follow_sys(capsys):
    logger = Logger()

    logger.info("to stdout")
    logger.error("to stderr")

    captured = capsys.readouterr()
    assert captured.out == "to stdout\n"
    assert captured.err == "to stderr\n"


def test_reset():
    logger = Logger(color_mode="never", out=io.StringIO(), err=io.StringIO())

    logger.info("hello")
    logger.error("boom")
    logger.reset()

    assert logger.get_counts() == (0, 0)
