"""Blocking single-keystroke input (POSIX terminals)."""

from __future__ import annotations

import os
import sys
import termios
import tty
from typing import Final, TextIO, final

_READ_SIZE: Final[int] = 32


@final
class Keyboard:
    """Wait for one keypress without requiring Enter."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin

    def press_any_key(self) -> str:
        """Block until a key arrives and return what was read.

        Escape sequences from arrow or function keys are consumed in one read
        so they do not leak into the shell afterwards. Non-tty input (pipes,
        tests) falls back to reading a single character.
        """
        if not self.stream.isatty():
            return self.stream.read(1)

        fd = self.stream.fileno()
        previous = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            data = os.read(fd, _READ_SIZE)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, previous)
        return data.decode(errors="replace")


__all__ = ["Keyboard"]
