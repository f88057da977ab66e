"""
Summary: Time-driven animation that maps elapsed time to an integer scroll offset.
Why: Keep the spin timing independent of rendering so curves can be swapped.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from typing import Final, Protocol, final

Clock = Callable[[], float]


class TimeToOffsetFn(Protocol):
    """Map normalized time ``t`` in ``[0, 1]`` to an offset in ``[0, last - first]``.

    Implementations must return exactly ``last - first`` at ``t == 1.0``.
    """

    def __call__(self, first: int, last: int, t: float) -> int:
        ...


@final
class LinearOffset:
    """Constant scroll speed."""

    def __call__(self, first: int, last: int, t: float) -> int:
        return math.floor((last - first) * t)


@final
class EaseOutOffset:
    """Cubic ease-out: fast start, slowing down into the settle frame."""

    def __call__(self, first: int, last: int, t: float) -> int:
        return math.floor((last - first) * (1.0 - (1.0 - t) ** 3))


EASINGS: Final[dict[str, TimeToOffsetFn]] = {
    "linear": LinearOffset(),
    "ease-out": EaseOutOffset(),
}


class Animation:
    """A single run of a time-to-offset curve over ``duration`` seconds.

    ``start`` stamps the start and end times; afterwards ``value`` may be
    queried repeatedly. Once the clock reaches ``end_time`` the normalized
    time clamps to exactly ``1.0`` and ``finished`` turns true for good.
    """

    duration: float
    fn: TimeToOffsetFn
    first: int
    last: int
    start_time: float
    end_time: float

    def __init__(
        self,
        duration: float,
        fn: TimeToOffsetFn,
        clock: Clock = time.monotonic,
    ) -> None:
        if duration < 0:
            raise ValueError(f"Animation duration must not be negative; received {duration}")
        self.duration = float(duration)
        self.fn = fn
        self._clock = clock
        self._started = False
        self._finished = False

    @classmethod
    def linear(cls, duration: float, clock: Clock = time.monotonic) -> "Animation":
        return cls(duration, EASINGS["linear"], clock)

    @classmethod
    def named(cls, easing: str, duration: float, clock: Clock = time.monotonic) -> "Animation":
        """Build an animation from a registered easing name."""

        try:
            fn = EASINGS[easing]
        except KeyError:
            valid = ", ".join(sorted(EASINGS))
            raise ValueError(f"Unsupported easing '{easing}'. Valid options: {valid}") from None
        return cls(duration, fn, clock)

    def start(self, first: int, last: int) -> None:
        self.first = first
        self.last = last
        self.start_time = self._clock()
        self.end_time = self.start_time + self.duration
        self._started = True
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def t(self) -> float:
        """Return normalized elapsed time, latching ``finished`` at the end."""

        if not self._started:
            raise RuntimeError("Animation has not been started")

        now = self._clock()
        if now >= self.end_time:
            self._finished = True
            return 1.0

        return (now - self.start_time) / self.duration

    def value(self) -> int:
        t = self.t()
        return self.fn(self.first, self.last, t)


__all__ = [
    "Animation",
    "Clock",
    "EASINGS",
    "EaseOutOffset",
    "LinearOffset",
    "TimeToOffsetFn",
]
