"""
Several progress bars redrawn together as one block.

The block has no ticker of its own: the caller updates bars and calls
``render()``. Each redraw moves the cursor up over the whole block and
rewrites every bar on its own row.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from .core import (
    Terminal,
    clear_line_control,
    cursor_up_control,
    cursor_visibility_control,
    get_default_terminal,
)
from .progress import ProgressBar

logger = logging.getLogger(__name__)


class MultiProgressBar:
    """
    Stacked progress bars.

    Bars handed to this block stop drawing themselves; only ``render()``
    writes them. Bars should be added before ``start()``: a bar added while
    active grows the block without reserving a row for it, so the first
    redraw after that moves the cursor into output above the block.

    Example:
        multi = MultiProgressBar()
        download = multi.add_bar(ProgressBar(100, "Download"))
        with multi:
            download.increment(10)
            multi.render()
    """

    def __init__(self, *, terminal: Optional[Terminal] = None):
        self._terminal = terminal or get_default_terminal()
        self._bars: List[ProgressBar] = []
        self._lock = threading.Lock()
        self._active = False

    @property
    def bars(self) -> List[ProgressBar]:
        with self._lock:
            return list(self._bars)

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._active

    def add_bar(self, bar: ProgressBar) -> ProgressBar:
        """
        Append a bar to the bottom of the block.

        Returns:
            The same bar, for chaining
        """
        bar.render_on_update = False
        with self._lock:
            if self._active:
                logger.warning(
                    "Bar added to an active MultiProgressBar; display may be corrupted"
                )
            self._bars.append(bar)
        return bar

    def start(self) -> None:
        """Hide the cursor and reserve one row per bar."""
        with self._lock:
            if self._active:
                return
            self._active = True
            reserved = "\n" * len(self._bars)
            self._terminal.write(cursor_visibility_control(False), reserved)
        logger.debug("Multi progress started")

    def render(self) -> None:
        """Redraw every bar in place; does nothing while inactive."""
        with self._lock:
            if not self._active:
                return
            parts: list = [cursor_up_control(len(self._bars))]
            for bar in self._bars:
                parts.extend((clear_line_control(), bar.render(), "\n"))
            self._terminal.write(*parts)

    def stop(self) -> None:
        """Show the cursor again and move below the block."""
        with self._lock:
            if not self._active:
                return
            self._active = False
            self._terminal.write(cursor_visibility_control(True), "\n")
        logger.debug("Multi progress stopped")

    def __enter__(self) -> "MultiProgressBar":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
