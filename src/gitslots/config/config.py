"""Configuration management for git-slots."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from gitslots.config.paths import default_config_path
from gitslots.errors import ConfigError
from gitslots.features.reel.domain.animation import EASINGS
from gitslots.platform.logging import logger

DEFAULT_SUFFIXES: Final[tuple[str, ...]] = (".rb",)
DEFAULT_DURATION: Final[float] = 5.0
DEFAULT_FLICKER_INTERVAL: Final[float] = 0.5
DEFAULT_EASING: Final[str] = "linear"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Filename suffixes eligible for the spin
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES

    # Animation timings in seconds
    duration: float = DEFAULT_DURATION
    flicker_interval: float = DEFAULT_FLICKER_INTERVAL

    # Frame cap for the scroll loop; 0 redraws as fast as possible
    max_fps: float = 0.0

    # Name of the time-to-offset curve
    easing: str = DEFAULT_EASING

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize loosely typed TOML values and validate the result.

        ``suffixes`` accepts a single string or a list; path fields flagged
        via ``_path_field`` are converted from strings.

        Raises:
            ConfigError: If any value is out of range.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if isinstance(self.suffixes, str):
            self.suffixes = (self.suffixes,)
        else:
            self.suffixes = tuple(self.suffixes)

        self.validate()

    def validate(self) -> None:
        """Reject values the spin cannot run with."""

        if not self.suffixes or any(
            not isinstance(suffix, str) or not suffix.strip() for suffix in self.suffixes
        ):
            raise ConfigError("suffixes must be a non-empty list of non-empty strings")
        for name in ("duration", "flicker_interval", "max_fps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number; received {value!r}")
        if self.duration < 0:
            raise ConfigError(f"duration must not be negative; received {self.duration}")
        if self.flicker_interval <= 0:
            raise ConfigError(
                f"flicker_interval must be positive; received {self.flicker_interval}"
            )
        if self.max_fps < 0:
            raise ConfigError(f"max_fps must not be negative; received {self.max_fps}")
        if not isinstance(self.easing, str) or self.easing not in EASINGS:
            valid = ", ".join(sorted(EASINGS))
            raise ConfigError(f"Unsupported easing '{self.easing}'. Valid options: {valid}")

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit config file; falls back to the environment override
                and then the per-user default location.

        Returns:
            Config: Loaded configuration object, or defaults when the file is absent.

        Raises:
            ConfigError: If the file cannot be parsed or holds invalid values.
        """
        config_file = default_config_path(path)

        # If config is already loaded from the same file, return cached instance
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Failed to read configuration {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning(
                    "Ignoring unknown configuration key '%s' in %s",
                    key,
                    config_file,
                    extra={"markup": False},
                )
                del config_dict[key]

            try:
                instance = cls(**config_dict)
            except TypeError as e:
                raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e
            logger.info("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = [
    "Config",
    "DEFAULT_DURATION",
    "DEFAULT_EASING",
    "DEFAULT_FLICKER_INTERVAL",
    "DEFAULT_SUFFIXES",
]
