"""Terminal output adapter.

Control sequences come from Rich's ``Control`` helpers and are written
straight to the console file so raw text is never re-wrapped or stripped.
Lines end with ``\\n\\r`` to stay correct while the tty is in cbreak mode.
"""

from __future__ import annotations

from typing import Final, final

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

LINE_END: Final[str] = "\n\r"


@final
class Terminal:
    """Cursor, clearing and raw writes against a Rich console."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(force_terminal=True, soft_wrap=True)

    @property
    def width(self) -> int:
        return self.console.size.width

    @property
    def height(self) -> int:
        return self.console.size.height

    def clear(self) -> None:
        self._control(Control.clear())

    def clear_line(self) -> None:
        self._control(Control((ControlType.ERASE_IN_LINE, 2)))

    def move_to_row(self, row: int) -> None:
        """Move to column one of ``row`` (zero based)."""

        self._control(Control.move_to(0, row))

    def beginning(self) -> None:
        self.move_to_row(0)

    def middle(self, height: int) -> None:
        self.move_to_row(height // 2)

    def hide_cursor(self) -> None:
        self._control(Control.show_cursor(False))
        self.flush()

    def show_cursor(self) -> None:
        self._control(Control.show_cursor(True))
        self.flush()

    def write(self, message: str) -> None:
        _ = self.console.file.write(message)

    def puts(self, message: str) -> None:
        self.write(message)
        self.write(LINE_END)

    def flush(self) -> None:
        self.console.file.flush()

    def _control(self, control: Control) -> None:
        self.write(control.segment.text)


__all__ = ["LINE_END", "Terminal"]
