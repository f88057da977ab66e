"""Command execution package for CLI."""

from gitslots.ui.cli.commands.spin import SpinCommand

__all__ = ["SpinCommand"]
