"""
Summary: Per-frame view over the rotated file list.
Why: Let the renderer ask which row is the centre and which is the last.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import NamedTuple


class WindowRow(NamedTuple):
    """One rendered row of a display window."""

    index: int
    text: str
    is_middle: bool
    is_last: bool


@dataclass(frozen=True, slots=True)
class DisplayWindow:
    """Rows ``first`` through ``first + length - 1`` of ``files``."""

    files: Sequence[str]
    first: int
    length: int

    @property
    def middle(self) -> int:
        return self.first + self.length // 2

    @property
    def last(self) -> int:
        return self.first + self.length - 1

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[WindowRow]:
        middle = self.middle
        last = self.last
        for index in range(self.first, last + 1):
            yield WindowRow(index, self.files[index], index == middle, index == last)


__all__ = ["DisplayWindow", "WindowRow"]
