"""
Summary: Width-trimmed, winner-rotated file listing that drives the scroll frames.
Why: Pre-rotating once lets the final frame land on the winner without render-time wrapping.
"""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from typing import Final, TypeVar, overload

from gitslots.errors import NoMatchingFilesError

from .animation import Animation
from .window import DisplayWindow

ELLIPSIS: Final[str] = "..."

T = TypeVar("T")


def trim(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` characters, marking the cut with an ellipsis."""

    if len(text) <= width:
        return text
    if width < len(ELLIPSIS):
        return text[: max(width, 0)]
    return f"{text[: width - len(ELLIPSIS)]}{ELLIPSIS}"


def rotation_split(size: int, winner_index: int, height: int) -> int:
    """Return the left-rotation amount that puts the winner in the settle row.

    The settle frame shows rows ``size - height`` onwards, so its middle row
    must hold the entry that sat at ``winner_index`` before rotating.
    """

    first = winner_index - height // 2
    last = first + height - 1
    return (last + 1) % size


def rotate(entries: Sequence[T], split: int) -> list[T]:
    """Left-rotate ``entries`` so that ``entries[split]`` comes first."""

    return [*entries[split:], *entries[:split]]


class FileList(Sequence[str]):
    """Tracked files arranged for a single spin.

    ``screen_height`` is the number of rows a frame occupies. It is clamped to
    the listing size so a short listing renders a shorter reel instead of
    indexing past either end.
    """

    winner: str
    winner_index: int
    trimmed_winner: str
    screen_width: int
    screen_height: int
    split_index: int

    def __init__(
        self,
        files: Sequence[str],
        screen_width: int,
        screen_height: int,
        *,
        suffixes: tuple[str, ...] = (),
        rng: random.Random | None = None,
    ) -> None:
        if not files:
            raise NoMatchingFilesError(suffixes)

        chooser = rng if rng is not None else random.Random()
        self.screen_width = screen_width
        self.screen_height = max(1, min(screen_height, len(files)))
        self.winner_index = chooser.randrange(len(files))
        self.winner = files[self.winner_index]
        self.trimmed_winner = trim(self.winner, screen_width)

        trimmed = [trim(name, screen_width) for name in files]
        self.split_index = rotation_split(len(trimmed), self.winner_index, self.screen_height)
        self._files: list[str] = rotate(trimmed, self.split_index)

    @property
    def settle_offset(self) -> int:
        """Offset of the frame that shows the winner in the middle row."""

        return len(self) - self.screen_height

    def sliding_window(self, animation: Animation) -> Iterator[DisplayWindow]:
        """Yield one window per frame until the animation reaches its end.

        The final window is always the settle frame.
        """
        animation.start(0, self.settle_offset)

        while not animation.finished:
            yield DisplayWindow(self, animation.value(), self.screen_height)

    def __len__(self) -> int:
        return len(self._files)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self._files[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)


__all__ = ["ELLIPSIS", "FileList", "rotate", "rotation_split", "trim"]
