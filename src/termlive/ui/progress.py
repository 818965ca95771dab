"""
Progress bar widget.

A ProgressBar holds one task's completion state. Standalone bars redraw
synchronously from ``update`` and ``finish`` (pull model). Once a bar is
handed to a MultiProgressBar it stops drawing itself and the composite
redraws it (push model).
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Optional

from rich.text import Text

from ..config import get_display_config
from .core import Terminal, clear_line_control, get_default_terminal
from .renderers import ProgressRenderer, ProgressStyle
from .state import ProgressSnapshot
from .theme import Theme, get_default_theme

logger = logging.getLogger(__name__)


class ProgressBar:
    """
    Determinate progress bar.

    ``current`` is always clamped to ``[0, total]``. With ``total > 0`` the bar
    is completed exactly when ``current == total``. A bar with ``total == 0``
    shows 0% and only completes through ``finish()``.

    Example:
        bar = ProgressBar(100, "Downloading", show_speed=True)
        for chunk in chunks:
            bar.increment(len(chunk))
        bar.finish()
    """

    def __init__(
        self,
        total: int,
        description: str = "",
        *,
        style: Optional[ProgressStyle] = None,
        preset: Optional[str] = None,
        terminal: Optional[Terminal] = None,
        theme: Optional[Theme] = None,
        clock: Callable[[], float] = time.monotonic,
        **options: Any,
    ):
        """
        Initialize the progress bar.

        Args:
            total: Ceiling of the bar (negative values become 0)
            description: Label printed before the bar
            style: Base style; defaults use the configured bar width
            preset: Glyph preset name from ``BAR_STYLES``
            terminal: Output coordinator (process default if omitted)
            theme: Color theme, read once here
            clock: Monotonic time source used for speed and ETA
            **options: Individual ProgressStyle overrides (width, fill_char, ...)
        """
        if style is None:
            style = ProgressStyle(width=get_display_config().bar_width)
        self.style = ProgressStyle.build(style, preset=preset, **options)
        self.theme = theme or get_default_theme()
        self._renderer = ProgressRenderer(self.style, self.theme)
        self._terminal = terminal or get_default_terminal()
        self._clock = clock
        self._lock = threading.RLock()

        self._total = max(0, int(total))
        self._current = 0
        self._description = description
        self._completed = False
        now = clock()
        self._started_at = now
        self._last_updated_at = now

        self.render_on_update = True

    @property
    def total(self) -> int:
        return self._total

    @property
    def current(self) -> int:
        with self._lock:
            return self._current

    @property
    def description(self) -> str:
        with self._lock:
            return self._description

    @property
    def completed(self) -> bool:
        with self._lock:
            return self._completed

    @property
    def percentage(self) -> float:
        return self.snapshot().percentage

    def set_description(self, description: str) -> None:
        """Change the label; shown on the next redraw."""
        with self._lock:
            self._description = description

    def update(self, current: int) -> None:
        """
        Set the current value and redraw.

        Args:
            current: New value, clamped to ``[0, total]``
        """
        with self._lock:
            value = max(0, min(int(current), self._total))
            self._current = value
            self._last_updated_at = self._clock()
            if self._total > 0:
                self._completed = value == self._total
            self._draw_locked()

    def increment(self, delta: int = 1) -> None:
        """Advance the current value by ``delta`` (may be negative)."""
        with self._lock:
            self.update(self._current + delta)

    def finish(self) -> None:
        """
        Force the bar to completion and draw it once.

        Calling this on a completed bar does nothing.
        """
        with self._lock:
            if self._completed:
                return
            self._current = self._total
            self._completed = True
            self._last_updated_at = self._clock()
            self._draw_locked()
        logger.debug(f"Progress '{self._description}' finished")

    def reset(self) -> None:
        """
        Return to zero and restart timing.

        The previously drawn line is left on screen.
        """
        with self._lock:
            self._current = 0
            self._completed = False
            now = self._clock()
            self._started_at = now
            self._last_updated_at = now

    def snapshot(self) -> ProgressSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def render(self) -> Text:
        """Build the current frame without writing it."""
        return self._renderer.render(self.snapshot())

    def _snapshot_locked(self) -> ProgressSnapshot:
        return ProgressSnapshot(
            total=self._total,
            current=self._current,
            description=self._description,
            completed=self._completed,
            started_at=self._started_at,
            last_updated_at=self._last_updated_at,
        )

    def _draw_locked(self) -> None:
        if not self.render_on_update:
            return
        frame = self._renderer.render(self._snapshot_locked())
        if self._completed:
            self._terminal.write(clear_line_control(), frame, "\n")
        else:
            self._terminal.write(clear_line_control(), frame)


def classic_style(**options: Any) -> ProgressStyle:
    return ProgressStyle.build(preset="classic", **options)


def modern_style(**options: Any) -> ProgressStyle:
    return ProgressStyle.build(preset="modern", **options)


def minimal_style(**options: Any) -> ProgressStyle:
    return ProgressStyle.build(preset="minimal", **options)


def arrow_style(**options: Any) -> ProgressStyle:
    return ProgressStyle.build(preset="arrow", **options)


def dot_style(**options: Any) -> ProgressStyle:
    return ProgressStyle.build(preset="dot", **options)
