"""Enumerate tracked files through the git command line."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Final, final

from gitslots.errors import ListingError
from gitslots.platform.logging import logger

GIT_EXECUTABLE: Final[str] = "git"

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def suffix_filter(suffixes: Sequence[str]) -> Callable[[str], bool]:
    """Build a predicate accepting file names that end with any of ``suffixes``."""

    wanted = tuple(suffixes)

    def _matches(name: str) -> bool:
        return name.endswith(wanted)

    return _matches


@final
class GitListing:
    """List files tracked by the git repository that contains ``cwd``."""

    def __init__(self, cwd: Path | None = None, runner: Runner = subprocess.run) -> None:
        self._cwd = cwd
        self._runner = runner

    def root_dir(self) -> Path:
        """Return the top-level directory of the working tree."""

        output = self._git("rev-parse", "--show-toplevel", cwd=self._cwd)
        return Path(output.strip())

    def ls_files(self) -> list[str]:
        """Return every tracked path, relative to the repository root."""

        root = self.root_dir()
        output = self._git("ls-files", "-z", cwd=root)
        return [name for name in output.split("\0") if name]

    def tracked_files(self, predicate: Callable[[str], bool]) -> list[str]:
        """Return tracked paths accepted by ``predicate`` in git's listing order."""

        files = self.ls_files()
        selected = [name for name in files if predicate(name)]
        logger.debug("Selected %d of %d tracked files", len(selected), len(files))
        return selected

    def _git(self, *args: str, cwd: Path | None) -> str:
        command = [GIT_EXECUTABLE, *args]
        options: dict[str, Any] = {"capture_output": True, "text": True, "check": True}
        try:
            completed = self._runner(command, cwd=cwd, **options)
        except FileNotFoundError as e:
            raise ListingError(f"git executable not found: {e}") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise ListingError(f"'{' '.join(command)}' failed: {detail}") from e
        return completed.stdout


__all__ = ["GIT_EXECUTABLE", "GitListing", "suffix_filter"]
