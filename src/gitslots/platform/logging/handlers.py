"""Rich console handler for spin events.

Where: platform/logging/handlers.py
What: Render structured ``spin_event`` records with icons, colors and compact paths.
Why: Keep formatting concerns out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SpinRichHandler(RichHandler):
    """Custom Rich handler that highlights spin lifecycle events."""

    _SPIN_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "spin.listing": ("📜", "cyan"),
        "spin.start": ("🎰", "blue"),
        "spin.settled": ("🛑", "magenta"),
        "spin.winner": ("🏆", "green"),
        "spin.error": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a repository-relative path, keeping only its trailing segments."""

        parts = [part for part in PurePosixPath(path).parts if part]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = ["…", *parts[-self._PATH_SEGMENT_LIMIT:]]

        text = Text()
        for index, part in enumerate(parts):
            if index:
                _ = text.append("/", style=Style(color="magenta"))
            style = Style(color="magenta") if part == "…" else Style(color="white")
            _ = text.append(part, style=style)
        return text if parts else Text(".")

    def _render_spin_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured spin events with dedicated styling."""

        event = getattr(record, "spin_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._SPIN_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        details: list[str] = []

        if event == "spin.listing":
            _ = body.append("Listing loaded")
            total_files = getattr(record, "total_files", None)
            suffixes = getattr(record, "suffixes", None)
            if isinstance(total_files, int):
                details.append(f"files={total_files}")
            if suffixes:
                details.append("suffixes=" + ",".join(suffixes))
        elif event == "spin.start":
            _ = body.append("Spinning")
            duration = getattr(record, "duration", None)
            easing = getattr(record, "easing", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
            if easing:
                details.append(f"easing={easing}")
        elif event == "spin.settled":
            _ = body.append("Settled")
            frames = getattr(record, "frames", None)
            elapsed = getattr(record, "elapsed_seconds", None)
            if isinstance(frames, int):
                details.append(f"frames={frames}")
            if isinstance(elapsed, (int, float)):
                details.append(f"elapsed={elapsed:.2f}s")
        elif event == "spin.winner":
            _ = body.append("Winner ")
            winner = getattr(record, "winner", None)
            if winner:
                _ = body.append_text(self._format_path(str(winner)))
        else:
            _ = body.append(record.getMessage())

        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for spin events."""

        spin_text = self._render_spin_message(record)
        if spin_text is not None:
            return spin_text

        return super().render_message(record, message)


__all__ = ["SpinRichHandler"]
