"""
Summary: Value wrapper that renders a line in reverse-video colors.
Why: Share one highlight style between the scroll frames and the flicker loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rich.color import ColorSystem
from rich.style import Style

HIGHLIGHT_STYLE: Final[Style] = Style(color="black", bgcolor="white")


@dataclass(frozen=True, slots=True)
class HighlightedLine:
    """A line of text shown black on white."""

    text: str

    def render(self) -> str:
        """Return the text wrapped in ANSI SGR codes (``ESC[30;47m`` ... ``ESC[0m``)."""

        return HIGHLIGHT_STYLE.render(self.text, color_system=ColorSystem.STANDARD)


__all__ = ["HIGHLIGHT_STYLE", "HighlightedLine"]
