"""Adapters for the outside world: git, the terminal and logging."""
