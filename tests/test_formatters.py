"""
Tests for UI formatting helpers.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import given, strategies as st

from termlive.ui.formatters import count_lines, format_eta, format_percent, format_speed


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (45, "45s"),
        (65, "1m5s"),
        (3723, "1h2m3s"),
        (7203, "2h0m3s"),
        (44.4, "44s"),
        (44.5, "44s"),
        (10.6, "10s"),
        (0, "0s"),
        (-3, "0s"),
        (math.inf, "0s"),
        (math.nan, "0s"),
    ],
)
def test_format_eta(seconds: float, expected: str) -> None:
    assert format_eta(seconds) == expected


def test_format_speed_and_percent() -> None:
    assert format_speed(12.34) == "12.3/s"
    assert format_speed(0) == "0.0/s"
    assert format_percent(25) == "25.0%"


@pytest.mark.parametrize(
    "content, expected",
    [
        ("", 0),
        ("a", 1),
        ("a\n", 1),
        ("\n", 1),
        ("a\nb", 2),
        ("a\nb\n", 2),
        ("a\n\n", 2),
    ],
)
def test_count_lines(content: str, expected: int) -> None:
    assert count_lines(content) == expected


@given(st.lists(st.text().map(lambda s: s.replace("\n", "")), min_size=1))
def test_count_lines_matches_rows_written(rows: list) -> None:
    """Verify newline-terminated rows are counted one each."""
    assert count_lines("".join(f"{row}\n" for row in rows)) == len(rows)
