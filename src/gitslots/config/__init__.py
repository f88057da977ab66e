"""Configuration loading and path policy."""

from gitslots.config.config import Config
from gitslots.config.paths import default_config_path

__all__ = ["Config", "default_config_path"]
