"""Shared fixtures for the whole test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from gitslots.config import Config


@pytest.fixture(autouse=True)
def reset_config_cache() -> Iterator[None]:
    """Drop the cached configuration between tests."""

    Config._instance = None
    Config._loaded_from = None
    yield
    Config._instance = None
    Config._loaded_from = None
