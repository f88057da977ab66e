"""Terminal input and output adapters."""

from .keyboard import Keyboard
from .output import LINE_END, Terminal

__all__ = ["Keyboard", "LINE_END", "Terminal"]
