"""Tests for color tokens."""

from __future__ import annotations

import pytest

from bkmview.colors import format_color, parse_color


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("color:#ff0000", 0xFF0000),
        ("color:#00FF7f", 0x00FF7F),
        ("color:#000000", 0),
        ("color:#abc", 0xAABBCC),
    ],
)
def test_parse_color(token: str, expected: int) -> None:
    """Six- and three-digit hex colors parse, in any letter case."""
    assert parse_color(token) == (expected, True)


@pytest.mark.parametrize("token", ["#ff0000", "color:", "color:red", "color:#ff00", "colour:#ff0000", "color:#gg0000"])
def test_parse_color_rejects(token: str) -> None:
    """Tokens without the prefix or with a bad hex value are not colors."""
    assert parse_color(token) == (0, False)


def test_format_color_round_trips() -> None:
    """format_color writes lowercase six-digit hex that parse_color reads back."""
    for value in (0, 0x123456, 0xFFFFFF):
        assert parse_color(format_color(value)) == (value, True)
    assert format_color(0x0A0B0C) == "color:#0a0b0c"
