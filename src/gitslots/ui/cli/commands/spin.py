"""src/gitslots/ui/cli/commands/spin.py
What: Build the real adapters for a spin and report its outcome.
Why: Keep adapter construction out of the use case so it stays testable.
"""

from typing import final

from gitslots.features.reel import SpinMachine, SpinRequest, SpinResult
from gitslots.platform.git import GitListing
from gitslots.platform.terminal import Keyboard, Terminal
from gitslots.ui.cli.args.options import SpinArgs
from gitslots.ui.cli.display.result import ResultDisplay


@final
class SpinCommand:
    """Run one spin against the current git working tree."""

    args: SpinArgs
    machine: SpinMachine
    request: SpinRequest
    result_display: ResultDisplay

    def __init__(self, args: SpinArgs) -> None:
        """Initialize spin command.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.machine = SpinMachine(GitListing(), Terminal(), Keyboard())
        self.request = SpinRequest(
            suffixes=args.suffixes,
            duration=args.duration,
            flicker_interval=args.flicker_interval,
            max_fps=args.max_fps,
            easing=args.easing,
            seed=args.seed,
        )
        self.result_display = ResultDisplay()

    def execute(self) -> SpinResult:
        """Execute the command.

        Returns:
            The completed spin.
        """
        result = self.machine.run(self.request)
        self.result_display.show_result(result, quiet=self.args.quiet)
        return result
