#!/usr/bin/env python3
"""
Logging utilities with colored output and counters.
"""

import sys
from typing import Optional, TextIO, Tuple
from ..common.config import LOG_COLOR, NO_COLOR
from ..common.enums import ColorMode


def color_text(text: str, color: str) -> str:
    """Apply ANSI color codes to text."""
    colors = {
        "green": "\033[92m",
        "red": "\033[91m",
        "reset": "\033[0m",
    }
    return f"{colors.get(color, '')}{text}{colors['reset']}"


def should_use_color(stream: TextIO, color_mode: str = LOG_COLOR) -> bool:
    """
    Decide whether ANSI colors should be written to the given stream.
    NO_COLOR always wins, otherwise LOG_COLOR decides (auto means TTY only).
    Unknown color modes disable color.
    """
    if NO_COLOR:
        return False

    try:
        mode = ColorMode.from_string(color_mode)
    except ValueError:
        return False
    if mode == ColorMode.ALWAYS:
        return True
    if mode == ColorMode.NEVER:
        return False

    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Logger:
    """A logger class with optionally colored output and message counters."""

    def __init__(
        self,
        color_mode: str = LOG_COLOR,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        """Initialize logger with zero counters."""
        self.color_mode = color_mode
        # None means resolve sys.stdout / sys.stderr at write time
        self._out = out
        self._err = err
        self.info_count = 0
        self.error_count = 0

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _write(self, stream: TextIO, message: str, color: str) -> None:
        if should_use_color(stream, self.color_mode):
            message = color_text(message, color)
        print(message, file=stream, flush=True)

    def info(self, message: str) -> None:
        """Print message to stdout in green and increment counter."""
        self.info_count += 1
        self._write(self.out, message, "green")

    def error(self, message: str) -> None:
        """Print message to stderr in red and increment counter."""
        self.error_count += 1
        self._write(self.err, message, "red")

    def get_counts(self) -> Tuple[int, int]:
        """Return current log counts as (info_count, error_count)."""
        return self.info_count, self.error_count

    def reset(self) -> None:
        """Reset all log counters."""
        self.info_count = 0
        self.error_count = 0
