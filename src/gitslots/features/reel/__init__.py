# Path: `src/gitslots/features/reel/__init__.py`
# Summary: Export reel domain and use case symbols.
# Why: Provide a stable import surface for the CLI and tests.

from .domain import (
    EASINGS,
    Animation,
    DisplayWindow,
    EaseOutOffset,
    FileList,
    HighlightedLine,
    LinearOffset,
    TimeToOffsetFn,
    WindowRow,
    rotate,
    rotation_split,
    trim,
)
from .usecases import (
    FlickerLoop,
    FlickerState,
    KeySource,
    Screen,
    SpinMachine,
    SpinRequest,
    SpinResult,
    TrackedFileSource,
)

__all__ = [
    "Animation",
    "DisplayWindow",
    "EASINGS",
    "EaseOutOffset",
    "FileList",
    "FlickerLoop",
    "FlickerState",
    "HighlightedLine",
    "KeySource",
    "LinearOffset",
    "Screen",
    "SpinMachine",
    "SpinRequest",
    "SpinResult",
    "TimeToOffsetFn",
    "TrackedFileSource",
    "WindowRow",
    "rotate",
    "rotation_split",
    "trim",
]
