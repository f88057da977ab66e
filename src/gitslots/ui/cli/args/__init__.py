"""Command line argument handling package."""

from gitslots.ui.cli.args.parser import ArgumentParser
from gitslots.ui.cli.args.options import CLIArgs, SpinArgs

__all__ = ["ArgumentParser", "CLIArgs", "SpinArgs"]
