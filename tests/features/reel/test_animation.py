"""Tests for the time-to-offset animation."""

from __future__ import annotations

import math

import pytest

from gitslots.features.reel import Animation, EaseOutOffset, LinearOffset

from .fakes import FakeClock


def _started(duration: float, last: int, fn: object | None = None) -> tuple[Animation, FakeClock]:
    clock = FakeClock(start=0.0)
    animation = Animation(duration, fn or LinearOffset(), clock)  # type: ignore[arg-type]
    animation.start(0, last)
    return animation, clock


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [(0.0, 0), (0.5, 5), (1.0, 10), (2.0, 20), (3.75, 37)],
)
def test_linear_value_is_floor_of_scaled_time(elapsed: float, expected: int) -> None:
    """Linear offsets equal floor((last - first) * t)."""

    animation, clock = _started(duration=4.0, last=40)
    clock.set(elapsed)

    assert animation.value() == expected
    assert expected == math.floor(40 * (elapsed / 4.0))
    assert not animation.finished


def test_value_reaches_exact_span_at_end_time() -> None:
    animation, clock = _started(duration=4.0, last=37)
    clock.set(4.0)

    assert animation.t() == 1.0
    assert animation.value() == 37
    assert animation.finished


def test_time_clamps_after_end_time() -> None:
    animation, clock = _started(duration=2.0, last=9)
    clock.set(100.0)

    assert animation.t() == 1.0
    assert animation.value() == 9


def test_finished_is_false_strictly_before_end_and_latches() -> None:
    """``finished`` only turns true once a query happens at or after the end."""

    animation, clock = _started(duration=1.0, last=10)

    for moment in (0.0, 0.25, 0.5, 0.999):
        clock.set(moment)
        _ = animation.value()
        assert not animation.finished

    clock.set(1.0)
    _ = animation.value()
    assert animation.finished

    clock.set(5.0)
    _ = animation.value()
    assert animation.finished


def test_finished_is_not_set_without_a_query() -> None:
    animation, clock = _started(duration=1.0, last=10)
    clock.set(10.0)

    assert not animation.finished


def test_zero_duration_finishes_on_first_query() -> None:
    animation, _ = _started(duration=0.0, last=6)

    assert animation.value() == 6
    assert animation.finished


def test_restart_rebinds_bounds_and_clears_finished() -> None:
    animation, clock = _started(duration=1.0, last=10)
    clock.set(2.0)
    _ = animation.value()
    assert animation.finished

    animation.start(0, 4)
    assert not animation.finished
    assert animation.first == 0 and animation.last == 4
    assert animation.end_time == 3.0


def test_querying_before_start_raises() -> None:
    animation = Animation(1.0, LinearOffset(), FakeClock())

    with pytest.raises(RuntimeError):
        _ = animation.value()


def test_negative_duration_is_rejected() -> None:
    with pytest.raises(ValueError):
        _ = Animation(-1.0, LinearOffset())


def test_ease_out_reaches_span_and_never_decreases() -> None:
    animation, clock = _started(duration=8.0, last=50, fn=EaseOutOffset())

    previous = -1
    for step in range(9):
        clock.set(float(step))
        value = animation.value()
        assert value >= previous
        assert value >= math.floor(50 * step / 8.0)
        previous = value

    assert previous == 50
    assert animation.finished


def test_named_builds_registered_curves() -> None:
    assert isinstance(Animation.named("linear", 1.0).fn, LinearOffset)
    assert isinstance(Animation.named("ease-out", 1.0).fn, EaseOutOffset)
    assert isinstance(Animation.linear(1.0).fn, LinearOffset)


def test_named_rejects_unknown_curves() -> None:
    with pytest.raises(ValueError, match="bounce"):
        _ = Animation.named("bounce", 1.0)
