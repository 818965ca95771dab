"""
Tests for the terminal output coordinator and escape sequences.
"""

from __future__ import annotations

import threading

from rich.text import Text

from termlive.ui.core import (
    CLEAR_LINE,
    CLEAR_SCREEN,
    ERASE_LINE_UP,
    HIDE_CURSOR,
    SHOW_CURSOR,
    clear_line_control,
    cursor_up_control,
    erase_lines_control,
    get_default_terminal,
    set_default_terminal,
)


def test_escape_sequences_are_bit_exact() -> None:
    """Verify the control builders emit the documented bytes."""
    assert str(clear_line_control()) == CLEAR_LINE == "\r\x1b[2K"
    assert str(cursor_up_control(3)) == "\x1b[3A"
    assert str(cursor_up_control(0)) == ""
    assert str(erase_lines_control(1)) == ERASE_LINE_UP == "\x1b[1A\x1b[2K"
    assert str(erase_lines_control(3)) == ERASE_LINE_UP * 3
    assert str(erase_lines_control(0)) == ""


def test_erase_is_one_up_and_clear_per_row() -> None:
    """Verify erasing N rows is always N cursor-up plus clear-line pairs."""
    for lines in range(1, 6):
        assert str(erase_lines_control(lines)) == "\x1b[1A\x1b[2K" * lines
    assert str(erase_lines_control(-2)) == ""


def test_cursor_and_screen_controls(terminal, stream) -> None:
    terminal.hide_cursor()
    terminal.show_cursor()
    terminal.clear_screen()
    assert stream.getvalue() == HIDE_CURSOR + SHOW_CURSOR + CLEAR_SCREEN


def test_write_joins_parts_into_one_chunk(terminal, stream) -> None:
    terminal.write(clear_line_control(), Text("frame", style="bold red"), "\n")
    assert stream.getvalue() == "\r\x1b[2Kframe\n"


def test_controls_dropped_when_not_a_terminal(plain_terminal, stream) -> None:
    """Verify redirected output keeps text but loses cursor movement."""
    plain_terminal.write(erase_lines_control(2), "done\n")
    plain_terminal.hide_cursor()
    assert stream.getvalue() == "done\n"


def test_redirected_frames_keep_carriage_returns(plain_terminal, stream) -> None:
    """Verify successive frames on a non-tty are separated by a carriage return."""
    plain_terminal.write(clear_line_control(), "frame 1")
    plain_terminal.write(clear_line_control(), "frame 2")
    assert stream.getvalue() == "\rframe 1\rframe 2"


def test_render_does_not_wrap_long_lines(terminal) -> None:
    line = "x" * 500
    assert terminal.render(Text(line)) == line


def test_closed_stream_degrades_silently(terminal, stream) -> None:
    """Verify writing to a closed stream does not raise."""
    stream.close()
    terminal.write("lost")
    terminal.erase_lines(2)
    terminal.clear_line()


def test_concurrent_writes_never_interleave(terminal, stream) -> None:
    """Verify each multi-part write lands contiguously."""

    def writer(char: str) -> None:
        for _ in range(200):
            terminal.write(clear_line_control(), char * 40, "\n")

    threads = [threading.Thread(target=writer, args=(c,)) for c in "abcdef"]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = stream.getvalue().split("\n")[:-1]
    assert len(lines) == 6 * 200
    for line in lines:
        assert line.startswith(CLEAR_LINE)
        body = line[len(CLEAR_LINE):]
        assert len(body) == 40 and len(set(body)) == 1


def test_default_terminal_is_shared(terminal) -> None:
    first = get_default_terminal()
    assert get_default_terminal() is first

    set_default_terminal(terminal)
    assert get_default_terminal() is terminal
