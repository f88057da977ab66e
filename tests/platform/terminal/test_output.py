"""Tests for the terminal output adapter."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from gitslots.platform.terminal import LINE_END, Terminal


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def terminal(output: StringIO) -> Terminal:
    return Terminal(Console(file=output, force_terminal=True, width=50, height=20))


def test_dimensions_come_from_the_console(terminal: Terminal) -> None:
    assert terminal.width == 50
    assert terminal.height == 20


@pytest.mark.parametrize(
    ("action", "expected"),
    [
        (lambda t: t.clear(), "\x1b[2J"),
        (lambda t: t.clear_line(), "\x1b[2K"),
        (lambda t: t.beginning(), "\x1b[1;1H"),
        (lambda t: t.middle(20), "\x1b[11;1H"),
        (lambda t: t.middle(7), "\x1b[4;1H"),
        (lambda t: t.move_to_row(5), "\x1b[6;1H"),
        (lambda t: t.hide_cursor(), "\x1b[?25l"),
        (lambda t: t.show_cursor(), "\x1b[?25h"),
    ],
)
def test_control_sequences(terminal: Terminal, output: StringIO, action, expected: str) -> None:
    action(terminal)

    assert output.getvalue() == expected


def test_puts_ends_lines_with_newline_carriage_return(terminal: Terminal, output: StringIO) -> None:
    terminal.puts("a.py")
    terminal.write("b.py")

    assert LINE_END == "\n\r"
    assert output.getvalue() == "a.py\n\rb.py"


def test_write_passes_escape_codes_through_untouched(terminal: Terminal, output: StringIO) -> None:
    terminal.write("\x1b[30;47mx\x1b[0m")

    assert output.getvalue() == "\x1b[30;47mx\x1b[0m"
