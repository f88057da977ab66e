"""Exception hierarchy shared across git-slots layers."""

from __future__ import annotations


class GitSlotsError(Exception):
    """Base class for failures the CLI reports without a traceback."""


class ListingError(GitSlotsError):
    """Raised when git cannot enumerate the tracked files."""


class NoMatchingFilesError(GitSlotsError):
    """Raised when the suffix filter leaves nothing to spin over."""

    def __init__(self, suffixes: tuple[str, ...]) -> None:
        self.suffixes = suffixes
        joined = ", ".join(suffixes) or "<none>"
        super().__init__(f"No tracked files match the requested suffixes: {joined}")


class ConfigError(GitSlotsError):
    """Raised when configuration values fail validation."""


__all__ = ["ConfigError", "GitSlotsError", "ListingError", "NoMatchingFilesError"]
