"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class SpinArgs:
    """Resolved options for a spin, after merging config and flags."""

    suffixes: tuple[str, ...]
    duration: float
    flicker_interval: float
    max_fps: float
    easing: str
    seed: int | None
    verbose: bool
    quiet: bool
    config_path: Path | None = None
    log_file: Path | None = None


CLIArgs = SpinArgs

__all__ = ["CLIArgs", "SpinArgs"]
