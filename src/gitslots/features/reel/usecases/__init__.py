"""Use cases that run a spin against the reel ports."""

from .flicker import FlickerLoop, FlickerState
from .ports import KeySource, Screen, TrackedFileSource
from .spin import SpinMachine, SpinRequest, SpinResult

__all__ = [
    "FlickerLoop",
    "FlickerState",
    "KeySource",
    "Screen",
    "SpinMachine",
    "SpinRequest",
    "SpinResult",
    "TrackedFileSource",
]
