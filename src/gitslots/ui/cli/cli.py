"""Command line interface for git-slots."""

import sys
from typing import final

from gitslots.errors import GitSlotsError
from gitslots.platform.logging import logger
from gitslots.ui.cli.args import ArgumentParser
from gitslots.ui.cli.args.options import CLIArgs
from gitslots.ui.cli.commands import SpinCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            _ = SpinCommand(args).execute()
        except KeyboardInterrupt:
            logger.info("Spin cancelled by user")
            sys.exit(130)
        except GitSlotsError as e:
            logger.error("%s", e, extra={"spin_event": "spin.error"})
            sys.exit(1)
        except Exception as e:
            logger.error(
                "An unexpected error occurred: %s", str(e), extra={"spin_event": "spin.error"}
            )
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
