"""
Summary: Drive one spin from listing to keypress.
Why: Sequence the scroll, flicker and input steps behind injectable ports.
"""

from __future__ import annotations

import random
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from gitslots.features.reel.domain.animation import Animation, Clock
from gitslots.features.reel.domain.file_list import FileList
from gitslots.features.reel.domain.highlight import HighlightedLine
from gitslots.features.reel.domain.window import DisplayWindow
from gitslots.platform.git import suffix_filter
from gitslots.platform.logging import logger

from .flicker import FlickerLoop
from .ports import KeySource, Screen, TrackedFileSource


@dataclass(slots=True, frozen=True)
class SpinRequest:
    """Parameters for a single spin."""

    suffixes: tuple[str, ...]
    duration: float = 5.0
    flicker_interval: float = 0.5
    max_fps: float = 0.0
    easing: str = "linear"
    seed: int | None = None


@dataclass(slots=True, frozen=True)
class SpinResult:
    """Outcome of a completed spin."""

    winner: str
    winner_index: int
    total_files: int
    frames: int
    key: str


@final
class SpinMachine:
    """Wire listing, animation, flicker and keyboard into one run."""

    def __init__(
        self,
        source: TrackedFileSource,
        screen: Screen,
        keys: KeySource,
        *,
        clock: Clock = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.source = source
        self.screen = screen
        self.keys = keys
        self._clock = clock
        self._sleep = sleep

    def prepare(self, request: SpinRequest) -> FileList:
        """Fetch the listing and arrange it around a freshly drawn winner."""

        names = self.source.tracked_files(suffix_filter(request.suffixes))
        rng = random.Random(request.seed) if request.seed is not None else None
        files = FileList(
            names,
            self.screen.width,
            self.screen.height,
            suffixes=request.suffixes,
            rng=rng,
        )
        logger.info(
            "Loaded %d files",
            len(files),
            extra={
                "spin_event": "spin.listing",
                "total_files": len(files),
                "suffixes": request.suffixes,
            },
        )
        return files

    def draw_window(self, window: DisplayWindow) -> None:
        """Redraw every row of ``window`` from the top of the screen."""

        self.screen.beginning()
        for row in window:
            self.screen.clear_line()
            text = HighlightedLine(row.text).render() if row.is_middle else row.text
            # A line ending on the bottom row would scroll the whole reel.
            if row.is_last:
                self.screen.write(text)
            else:
                self.screen.puts(text)
        self.screen.flush()

    def spin(self, files: FileList, request: SpinRequest) -> int:
        """Run the scroll animation to its settle frame; return frames drawn."""

        animation = Animation.named(request.easing, request.duration, self._clock)
        frame_budget = 1.0 / request.max_fps if request.max_fps > 0 else 0.0
        logger.info(
            "Spinning for %.2fs",
            request.duration,
            extra={
                "spin_event": "spin.start",
                "duration": request.duration,
                "easing": request.easing,
            },
        )

        started = self._clock()
        frames = 0
        for window in files.sliding_window(animation):
            frame_started = self._clock()
            self.draw_window(window)
            frames += 1
            if frame_budget and not animation.finished:
                now = self._clock()
                # Never sleep past the settle time.
                remaining = min(frame_budget - (now - frame_started), animation.end_time - now)
                if remaining > 0:
                    self._sleep(remaining)

        logger.info(
            "Settled after %d frames",
            frames,
            extra={
                "spin_event": "spin.settled",
                "frames": frames,
                "elapsed_seconds": self._clock() - started,
            },
        )
        return frames

    def run(self, request: SpinRequest) -> SpinResult:
        """Spin, flicker the winner and wait for a key.

        The cursor is hidden for the duration and restored even when the
        run is interrupted.
        """
        files = self.prepare(request)
        stop = threading.Event()
        thread: threading.Thread | None = None

        self.screen.hide_cursor()
        try:
            self.screen.clear()
            frames = self.spin(files, request)

            flicker = FlickerLoop(
                self.screen,
                files.trimmed_winner,
                files.screen_height,
                stop,
                interval=request.flicker_interval,
                sleep=self._sleep,
            )
            thread = flicker.start()
            key = self.keys.press_any_key()
        finally:
            stop.set()
            if thread is not None:
                # At most one more cycle runs after stop.
                thread.join(timeout=2 * request.flicker_interval)
                self.screen.move_to_row(files.screen_height - 1)
                self.screen.puts("")
            self.screen.show_cursor()

        logger.info(
            "Winner: %s",
            files.winner,
            extra={"spin_event": "spin.winner", "winner": files.winner},
        )
        return SpinResult(
            winner=files.winner,
            winner_index=files.winner_index,
            total_files=len(files),
            frames=frames,
            key=key,
        )


__all__ = ["SpinMachine", "SpinRequest", "SpinResult"]
