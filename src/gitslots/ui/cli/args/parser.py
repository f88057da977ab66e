"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from gitslots.config.config import Config
from gitslots.features.reel.domain.animation import EASINGS
from gitslots.platform.logging import DEFAULT_CONSOLE_LEVEL, logger, setup_logger
from gitslots.ui.cli.args.options import SpinArgs


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got '{raw}'") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero, got {raw}")
    return value


def _non_negative_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got '{raw}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {raw}")
    return value


def _suffix(raw: str) -> str:
    if not raw.strip():
        raise argparse.ArgumentTypeError("suffix must not be empty")
    return raw


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="git-slots",
            description=(
                "Spin a slot-machine reel over the files tracked by git and "
                "land on a random winner. Press any key to stop."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "-s",
            "--suffix",
            dest="suffixes",
            action="append",
            type=_suffix,
            metavar="SUFFIX",
            help="Only spin over files ending with SUFFIX (repeatable, default .rb)",
        )
        _ = parser.add_argument(
            "--duration",
            type=_non_negative_float,
            metavar="SECONDS",
            help="How long the reel scrolls before settling (default 5)",
        )
        _ = parser.add_argument(
            "--flicker-interval",
            type=_positive_float,
            metavar="SECONDS",
            help="Delay between winner highlight toggles (default 0.5)",
        )
        _ = parser.add_argument(
            "--max-fps",
            type=_non_negative_float,
            metavar="FPS",
            help="Cap the scroll redraw rate; 0 redraws as fast as possible",
        )
        _ = parser.add_argument(
            "--easing",
            choices=sorted(EASINGS),
            help="Scroll speed curve (default linear)",
        )
        _ = parser.add_argument(
            "--seed",
            type=int,
            help="Seed the winner draw for a reproducible spin",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            metavar="CONFIG_PATH",
            help="Read settings from this TOML file instead of the default location",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            metavar="LOG_PATH",
            help="Also write detailed logs to this file",
        )

        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed progress on stderr",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> SpinArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            SpinArgs: Flags merged over the loaded configuration.

        Raises:
            SystemExit: If argparse rejects the arguments.
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = DEFAULT_CONSOLE_LEVEL

        config_path = Path(parsed_args.config) if parsed_args.config else None
        configuration = Config.load(config_path)

        log_file = Path(parsed_args.log_file) if parsed_args.log_file else configuration.log_file
        _ = setup_logger(log_file=log_file, console_level=log_level)

        args = SpinArgs(
            suffixes=tuple(parsed_args.suffixes or configuration.suffixes),
            duration=_pick(parsed_args.duration, configuration.duration),
            flicker_interval=_pick(parsed_args.flicker_interval, configuration.flicker_interval),
            max_fps=_pick(parsed_args.max_fps, configuration.max_fps),
            easing=parsed_args.easing or configuration.easing,
            seed=parsed_args.seed,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            config_path=config_path,
            log_file=log_file,
        )
        logger.debug("Resolved arguments: %s", args)
        return args


def _pick(flag: float | None, configured: float) -> float:
    """Prefer an explicit flag, including zero, over the configured value."""

    return configured if flag is None else flag
