"""Domain objects for the reel: animation, windows, listing and highlight."""

from .animation import EASINGS, Animation, EaseOutOffset, LinearOffset, TimeToOffsetFn
from .file_list import FileList, rotate, rotation_split, trim
from .highlight import HighlightedLine
from .window import DisplayWindow, WindowRow

__all__ = [
    "Animation",
    "DisplayWindow",
    "EASINGS",
    "EaseOutOffset",
    "FileList",
    "HighlightedLine",
    "LinearOffset",
    "TimeToOffsetFn",
    "WindowRow",
    "rotate",
    "rotation_split",
    "trim",
]
