"""
Core terminal output infrastructure.

Widgets never print directly; they hand their erase and write sequences to a
Terminal, which keeps each redraw contiguous on the shared stream.
"""

from .terminal import (
    CLEAR_LINE,
    CLEAR_SCREEN,
    ERASE_LINE_UP,
    HIDE_CURSOR,
    SHOW_CURSOR,
    Terminal,
    clear_line_control,
    cursor_up_control,
    cursor_visibility_control,
    erase_lines_control,
    get_default_terminal,
    set_default_terminal,
)

__all__ = [
    "CLEAR_LINE",
    "CLEAR_SCREEN",
    "ERASE_LINE_UP",
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "Terminal",
    "clear_line_control",
    "cursor_up_control",
    "cursor_visibility_control",
    "erase_lines_control",
    "get_default_terminal",
    "set_default_terminal",
]
