"""git-slots: spin a slot-machine reel over your tracked files."""

__version__ = "0.1.0"
