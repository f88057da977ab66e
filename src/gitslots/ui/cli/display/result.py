"""src/gitslots/ui/cli/display/result.py
What: Print the full, untrimmed winner once the reel has stopped.
Why: The on-screen winner may be cut to the terminal width.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.text import Text

from gitslots.features.reel import SpinResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_result(self, result: SpinResult, quiet: bool = False) -> None:
        """Display the winner of a spin.

        Args:
            result: Completed spin.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        line = Text()
        _ = line.append("Winner: ", style="bold green")
        _ = line.append(result.winner, style="white")
        _ = line.append(
            f" ({result.winner_index + 1} of {result.total_files})", style="dim"
        )
        self.console.print(line)
