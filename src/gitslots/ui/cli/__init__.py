"""Command line interface package."""

from gitslots.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
