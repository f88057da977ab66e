"""Tests for the spin command wiring."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from gitslots.features.reel import SpinRequest, SpinResult
from gitslots.ui.cli.args import SpinArgs
from gitslots.ui.cli.commands import SpinCommand


@pytest.fixture
def args() -> SpinArgs:
    return SpinArgs(
        suffixes=(".py", ".pyi"),
        duration=2.0,
        flicker_interval=0.3,
        max_fps=24.0,
        easing="ease-out",
        seed=9,
        verbose=False,
        quiet=True,
    )


@pytest.fixture
def adapters(mocker: MockerFixture) -> dict[str, MagicMock]:
    module = "gitslots.ui.cli.commands.spin"
    return {
        name: mocker.patch(f"{module}.{name}")
        for name in ("GitListing", "Terminal", "Keyboard", "SpinMachine", "ResultDisplay")
    }


def test_command_builds_request_from_args(args: SpinArgs, adapters: dict[str, MagicMock]) -> None:
    command = SpinCommand(args)

    adapters["SpinMachine"].assert_called_once_with(
        adapters["GitListing"].return_value,
        adapters["Terminal"].return_value,
        adapters["Keyboard"].return_value,
    )
    assert command.request == SpinRequest(
        suffixes=(".py", ".pyi"),
        duration=2.0,
        flicker_interval=0.3,
        max_fps=24.0,
        easing="ease-out",
        seed=9,
    )


def test_execute_runs_machine_and_reports(args: SpinArgs, adapters: dict[str, MagicMock]) -> None:
    result = SpinResult(winner="a.py", winner_index=0, total_files=3, frames=10, key="x")
    adapters["SpinMachine"].return_value.run.return_value = result
    command = SpinCommand(args)

    assert command.execute() is result

    adapters["SpinMachine"].return_value.run.assert_called_once_with(command.request)
    adapters["ResultDisplay"].return_value.show_result.assert_called_once_with(result, quiet=True)
