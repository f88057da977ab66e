"""Ports for the reel feature."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TrackedFileSource(Protocol):
    """Enumerate candidate files for the spin."""

    def tracked_files(self, predicate: Callable[[str], bool]) -> list[str]:
        """Return the names accepted by ``predicate`` in source order."""

        ...


class Screen(Protocol):
    """Minimal cursor-addressed output surface."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def clear(self) -> None: ...

    def clear_line(self) -> None: ...

    def move_to_row(self, row: int) -> None: ...

    def beginning(self) -> None: ...

    def middle(self, height: int) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def write(self, message: str) -> None: ...

    def puts(self, message: str) -> None: ...

    def flush(self) -> None: ...


class KeySource(Protocol):
    """Block until the user presses a key."""

    def press_any_key(self) -> str:
        """Return the key that ended the wait."""

        ...


__all__ = ["KeySource", "Screen", "TrackedFileSource"]
