"""
Live multi-line display.

A Live block is replaced wholesale on each redraw: the rows drawn last time
are erased and the new content is written in the same terminal write. The
row count of the last draw is recorded in the same critical section as the
write, so the next erase removes exactly what is on screen. Unchanged content
is never rewritten.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Protocol, Tuple

from ..config import get_display_config
from .core import Terminal, erase_lines_control, get_default_terminal
from .formatters import count_lines

logger = logging.getLogger(__name__)


class Live:
    """Block of text that refreshes in place."""

    def __init__(
        self,
        *,
        refresh_interval: Optional[float] = None,
        auto_refresh: bool = True,
        terminal: Optional[Terminal] = None,
    ):
        """
        Initialize the live block.

        Args:
            refresh_interval: Seconds between ticks (configured default if omitted)
            auto_refresh: Redraw from a background tick (push) instead of on
                every ``update`` call (pull)
            terminal: Output coordinator (process default if omitted)
        """
        self._terminal = terminal or get_default_terminal()
        self._refresh_interval = (
            refresh_interval or get_display_config().refresh_interval
        )
        self.auto_refresh = auto_refresh

        self._lock = threading.RLock()
        self._content = ""
        self._last_content = ""
        self._last_lines = 0
        self._active = False
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def content(self) -> str:
        with self._lock:
            return self._content

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._active

    @property
    def refresh_interval(self) -> float:
        with self._lock:
            return self._refresh_interval

    @property
    def last_lines(self) -> int:
        """Rows occupied by the last successful draw."""
        with self._lock:
            return self._last_lines

    def set_refresh_interval(self, interval: float) -> None:
        """Change the tick period; a running loop picks it up on its next wait."""
        with self._lock:
            self._refresh_interval = interval

    def start(self) -> None:
        """Activate the block; launches the tick loop in auto-refresh mode."""
        with self._lock:
            if self._active:
                return
            self._active = True
            if self.auto_refresh:
                stop_event = threading.Event()
                self._stop_event = stop_event
                self._thread = threading.Thread(
                    target=self._refresh_loop,
                    args=(stop_event,),
                    name=f"live-{id(self):x}",
                    daemon=True,
                )
                self._thread.start()
        logger.debug("Live display started")

    def stop(self) -> None:
        """Deactivate, signal the loop, and erase the drawn block."""
        with self._lock:
            if not self._active:
                return
            self._active = False
            if self._stop_event is not None:
                self._stop_event.set()
            self._stop_event = None
            self._thread = None
            self._erase_locked()
        logger.debug("Live display stopped")

    def update(self, content: str) -> None:
        """Replace the content; redraws immediately unless auto-refreshing."""
        with self._lock:
            self._content = content
            if not self.auto_refresh:
                self.refresh()

    def update_and_refresh(self, content: str) -> None:
        """Replace the content and redraw now regardless of mode."""
        with self._lock:
            self._content = content
            self.refresh()

    def append(self, content: str) -> None:
        with self._lock:
            self.update(self._content + content)

    def append_line(self, line: str) -> None:
        self.append(line + "\n")

    def clear(self) -> None:
        """Blank the content and erase the drawn block, active or not."""
        with self._lock:
            self._content = ""
            self._erase_locked()

    def refresh(self) -> bool:
        """
        Redraw if active and the content changed since the last draw.

        Returns:
            True if anything was written
        """
        with self._lock:
            if not self._active or self._content == self._last_content:
                return False

            content = self._content
            parts = []
            if self._last_lines:
                parts.append(erase_lines_control(self._last_lines))
            if content:
                parts.append(content)
            self._terminal.write(*parts)

            self._last_content = content
            self._last_lines = count_lines(content)
            return True

    def _erase_locked(self) -> None:
        if self._last_lines:
            self._terminal.write(erase_lines_control(self._last_lines))
        self._last_content = ""
        self._last_lines = 0

    def _refresh_loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.refresh_interval):
            if not self.is_active:
                return
            self.refresh()

    def __enter__(self) -> "Live":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()


class ContentBuilder(Protocol):
    """Anything that can produce a text snapshot on demand."""

    def build(self) -> str: ...


class LiveRenderer:
    """
    Aggregate several content builders into one Live block.

    Every tick polls the builders in registration order and pushes their
    joined output (each followed by a newline) into the block.
    """

    def __init__(
        self,
        *,
        refresh_interval: Optional[float] = None,
        terminal: Optional[Terminal] = None,
    ):
        self.live = Live(
            refresh_interval=refresh_interval, auto_refresh=False, terminal=terminal
        )
        self._builders: List[ContentBuilder] = []
        self._lock = threading.Lock()
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    def add_builder(self, builder: ContentBuilder) -> None:
        with self._lock:
            self._builders.append(builder)

    @property
    def is_active(self) -> bool:
        return self.live.is_active

    def start(self) -> None:
        with self._lock:
            if self.live.is_active:
                return
            self.live.start()
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._render_loop,
                args=(stop_event,),
                name=f"live-renderer-{id(self):x}",
                daemon=True,
            )
            self._thread.start()

    def stop(self) -> None:
        with self._lock:
            if self._stop_event is not None:
                self._stop_event.set()
            self._stop_event = None
            self._thread = None
        self.live.stop()

    def build(self) -> str:
        """Snapshot all builders into one block of text."""
        with self._lock:
            builders = list(self._builders)
        return "".join(f"{builder.build()}\n" for builder in builders)

    def render(self) -> str:
        """Poll the builders and redraw the block if the output changed."""
        content = self.build()
        self.live.update(content)
        return content

    def _render_loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.live.refresh_interval):
            if not self.live.is_active:
                return
            self.render()

    def __enter__(self) -> "LiveRenderer":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()


class ProgressBuilder:
    """Compact progress line for use inside a LiveRenderer."""

    def __init__(
        self,
        label: str,
        total: int,
        width: Optional[int] = None,
        show_percent: bool = True,
    ):
        self.label = label
        self.total = max(0, int(total))
        self.width = width or get_display_config().builder_width
        self.show_percent = show_percent
        self._current = 0
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        with self._lock:
            return self._current

    def set_progress(self, current: int) -> None:
        with self._lock:
            self._current = max(0, min(int(current), self.total))

    def build(self) -> str:
        with self._lock:
            current = self._current

        if self.total == 0:
            return f"{self.label}: 0%"

        ratio = current / self.total
        filled = max(0, min(int(ratio * self.width), self.width))
        bar = "█" * filled + "░" * (self.width - filled)

        if self.show_percent:
            return f"{self.label}: [{bar}] {ratio * 100:.1f}%"
        return f"{self.label}: [{bar}] {current}/{self.total}"


class StatusBuilder:
    """Key/value status lines, in insertion order."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}
        self._lock = threading.Lock()

    def set_status(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = value

    def remove_status(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def build(self) -> str:
        with self._lock:
            items = list(self._items.items())
        return "\n".join(f"{key}: {value}" for key, value in items)


def create_live_progress(
    label: str,
    total: int,
    *,
    terminal: Optional[Terminal] = None,
) -> Tuple[LiveRenderer, ProgressBuilder]:
    """
    Build a live progress line.

    The returned renderer polls the builder while it is started::

        renderer, builder = create_live_progress("Sync", 200)
        with renderer:
            for i in range(200):
                builder.set_progress(i + 1)
    """
    renderer = LiveRenderer(terminal=terminal)
    builder = ProgressBuilder(label, total)
    renderer.add_builder(builder)
    return renderer, builder
