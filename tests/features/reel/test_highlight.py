"""Tests for the reverse-video line wrapper."""

from gitslots.features.reel import HighlightedLine


def test_render_wraps_text_in_black_on_white_codes() -> None:
    assert HighlightedLine("lib/slots.py").render() == "\x1b[30;47mlib/slots.py\x1b[0m"


def test_highlighted_lines_compare_by_text() -> None:
    assert HighlightedLine("a.py") == HighlightedLine("a.py")
    assert HighlightedLine("a.py") != HighlightedLine("b.py")
