"""Display management for CLI interface."""

from gitslots.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
