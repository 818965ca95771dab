"""
Tests for stacked progress bars.
"""

from __future__ import annotations

import logging

from termlive.ui import MultiProgressBar, ProgressBar
from termlive.ui.core import CLEAR_LINE, HIDE_CURSOR, SHOW_CURSOR


def test_start_hides_cursor_and_reserves_rows(terminal, stream) -> None:
    multi = MultiProgressBar(terminal=terminal)
    multi.add_bar(ProgressBar(10, "a", terminal=terminal))
    multi.add_bar(ProgressBar(10, "b", terminal=terminal))

    multi.start()
    assert multi.is_active
    assert stream.getvalue() == HIDE_CURSOR + "\n\n"


def test_render_moves_up_and_redraws_each_bar(terminal, stream) -> None:
    multi = MultiProgressBar(terminal=terminal)
    first = multi.add_bar(ProgressBar(10, "a", width=10, terminal=terminal))
    second = multi.add_bar(ProgressBar(10, "b", width=10, terminal=terminal))
    multi.start()
    reserved = stream.getvalue()

    first.update(5)
    second.update(10)
    assert stream.getvalue() == reserved

    multi.render()
    frame = stream.getvalue()[len(reserved):]
    assert frame == (
        "\x1b[2A"
        + CLEAR_LINE
        + first.render().plain
        + "\n"
        + CLEAR_LINE
        + second.render().plain
        + "\n"
    )


def test_render_while_inactive_writes_nothing(terminal, stream) -> None:
    multi = MultiProgressBar(terminal=terminal)
    multi.add_bar(ProgressBar(10, terminal=terminal))
    multi.render()
    assert stream.getvalue() == ""


def test_stop_shows_cursor(terminal, stream) -> None:
    multi = MultiProgressBar(terminal=terminal)
    multi.add_bar(ProgressBar(10, terminal=terminal))
    with multi:
        multi.render()

    assert not multi.is_active
    assert stream.getvalue().endswith(SHOW_CURSOR + "\n")


def test_cursor_up_uses_bar_count_at_redraw(terminal, stream) -> None:
    multi = MultiProgressBar(terminal=terminal)
    multi.add_bar(ProgressBar(10, terminal=terminal))
    multi.add_bar(ProgressBar(10, terminal=terminal))
    with multi:
        multi.render()
    assert "\x1b[2A" in stream.getvalue()

    multi.add_bar(ProgressBar(10, terminal=terminal))
    offset = len(stream.getvalue())
    with multi:
        multi.render()
    assert "\x1b[3A" in stream.getvalue()[offset:]
    assert len(multi.bars) == 3


def test_adding_bar_while_active_warns(terminal, caplog) -> None:
    multi = MultiProgressBar(terminal=terminal)
    multi.start()
    with caplog.at_level(logging.WARNING, logger="termlive"):
        multi.add_bar(ProgressBar(10, terminal=terminal))
    multi.stop()

    assert "active MultiProgressBar" in caplog.text
    assert len(multi.bars) == 1
