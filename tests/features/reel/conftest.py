"""Shared fixtures for reel feature tests."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from gitslots.platform.terminal import Terminal


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def terminal(output: StringIO) -> Terminal:
    """Terminal writing to memory with a 40x4 screen."""

    return Terminal(Console(file=output, force_terminal=True, width=40, height=4))
