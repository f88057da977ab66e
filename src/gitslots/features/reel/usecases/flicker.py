"""
Summary: Background loop that blinks the winning line until told to stop.
Why: Keep the post-settle effect running while the main thread blocks on input.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from enum import Enum
from typing import final

from gitslots.features.reel.domain.highlight import HighlightedLine
from gitslots.platform.logging import logger

from .ports import Screen


class FlickerState(str, Enum):
    """Which rendering of the winner is on screen."""

    HIGHLIGHT = "highlight"
    PLAIN = "plain"

    def toggled(self) -> "FlickerState":
        if self is FlickerState.HIGHLIGHT:
            return FlickerState.PLAIN
        return FlickerState.HIGHLIGHT


@final
class FlickerLoop:
    """Alternate the winner between highlighted and plain every ``interval``.

    ``stop`` is checked after each write and sleep, so at most one more cycle
    runs once it is set.
    """

    def __init__(
        self,
        screen: Screen,
        line: str,
        view_height: int,
        stop: threading.Event,
        *,
        interval: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.screen = screen
        self.line = line
        self.view_height = view_height
        self.stop = stop
        self.interval = interval
        self._sleep = sleep
        self.state: FlickerState | None = None

    def draw(self, state: FlickerState) -> None:
        self.screen.middle(self.view_height)
        if state is FlickerState.HIGHLIGHT:
            self.screen.write(HighlightedLine(self.line).render())
        else:
            self.screen.write(self.line)
        self.screen.flush()
        self.state = state

    def run(self) -> int:
        """Run until ``stop`` is set; return the number of completed cycles."""

        state = FlickerState.HIGHLIGHT
        cycles = 0
        while True:
            self.draw(state)
            self._sleep(self.interval)
            cycles += 1
            if self.stop.is_set():
                break
            state = state.toggled()

        logger.debug("Flicker loop stopped after %d cycles", cycles)
        return cycles

    def start(self) -> threading.Thread:
        """Run the loop on a daemon thread so it never blocks interpreter exit."""

        thread = threading.Thread(target=self.run, name="gitslots-flicker", daemon=True)
        thread.start()
        return thread


__all__ = ["FlickerLoop", "FlickerState"]
