"""
Terminal output coordination.

Every widget writes through a Terminal. A single call to ``write`` is emitted
as one uninterrupted chunk, so the erase-then-write pair of one redraw cannot
interleave with another writer at the byte level. The escape sequences built
here are the wire contract with the terminal and must stay bit-exact.

Column math treats one code unit as one terminal column. Wide characters
(CJK, emoji) are not measured.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Union

from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

logger = logging.getLogger(__name__)

Part = Union[Control, Text, str]

ERASE_LINE_UP = "\x1b[1A\x1b[2K"
CLEAR_LINE = "\r\x1b[2K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def clear_line_control() -> Control:
    """Return to column 0 and clear the whole current line."""
    return Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2))


def cursor_up_control(lines: int) -> Control:
    """Move the cursor up ``lines`` rows (nothing for zero)."""
    if lines <= 0:
        return Control()
    return Control((ControlType.CURSOR_UP, lines))


def cursor_visibility_control(visible: bool) -> Control:
    return Control.show_cursor(visible)


def erase_lines_control(lines: int) -> Control:
    """
    Erase a block of ``lines`` previously drawn rows.

    Each row is removed by moving the cursor up one line and clearing it,
    repeated once per row.

    Args:
        lines: Number of rows the previous draw occupied

    Returns:
        Control sequence performing the erase
    """
    codes: list = []
    for _ in range(max(0, lines)):
        codes.append((ControlType.CURSOR_UP, 1))
        codes.append((ControlType.ERASE_IN_LINE, 2))
    return Control(*codes)


class Terminal:
    """Serialize all widget output onto one console stream."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)
        self._lock = threading.Lock()

    @property
    def is_terminal(self) -> bool:
        return self.console.is_terminal

    def render(self, text: Text) -> str:
        """Render styled text to a string without wrapping or cropping."""
        with self.console.capture() as capture:
            self.console.print(
                text, end="", soft_wrap=True, highlight=False, markup=False
            )
        return capture.get()

    def write(self, *parts: Part) -> None:
        """
        Write all parts as a single chunk.

        When the console is not a terminal, control parts are reduced to their
        carriage returns, so redirected frames still land on separate rewrites
        instead of running together. Plain strings are written verbatim.
        Failed writes are logged and swallowed so a closed stream only degrades
        the display.

        Args:
            *parts: Controls, styled Text, or raw strings in output order
        """
        keep_controls = self.is_terminal
        chunks: list[str] = []
        for part in parts:
            if isinstance(part, Control):
                text = str(part)
                chunks.append(text if keep_controls else "\r" * text.count("\r"))
            elif isinstance(part, Text):
                chunks.append(self.render(part))
            else:
                chunks.append(part)

        data = "".join(chunks)
        if not data:
            return

        with self._lock:
            try:
                stream = self.console.file
                stream.write(data)
                stream.flush()
            except (OSError, ValueError) as e:
                logger.debug(f"Terminal write dropped: {e}")

    def clear_line(self) -> None:
        self.write(clear_line_control())

    def erase_lines(self, lines: int) -> None:
        self.write(erase_lines_control(lines))

    def hide_cursor(self) -> None:
        self.write(cursor_visibility_control(False))

    def show_cursor(self) -> None:
        self.write(cursor_visibility_control(True))

    def clear_screen(self) -> None:
        """Clear the full screen and home the cursor."""
        self.write(Control.clear(), Control.home())


_default_terminal: Optional[Terminal] = None
_default_lock = threading.Lock()


def get_default_terminal() -> Terminal:
    """Return the process-wide terminal, created on first use."""
    global _default_terminal
    if _default_terminal is None:
        with _default_lock:
            if _default_terminal is None:
                _default_terminal = Terminal()
    return _default_terminal


def set_default_terminal(terminal: Optional[Terminal]) -> None:
    """Replace the process-wide terminal (``None`` resets to lazy creation)."""
    global _default_terminal
    with _default_lock:
        _default_terminal = terminal
