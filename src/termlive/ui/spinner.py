"""
Indeterminate spinner animation.

Each active Spinner owns one daemon thread that wakes on a fixed interval,
draws the current frame over the previous one, and advances the frame index.
Start and stop are idempotent. ``stop()`` sets a single-slot stop event and
returns without waiting for the thread; the final line erase happens under
the widget lock, after any in-flight tick.

Only one animated widget may draw on a terminal region at a time. Running a
spinner alongside another live widget on the same terminal corrupts the
display.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from ..config import get_display_config
from .core import Terminal, clear_line_control, get_default_terminal
from .renderers import SpinnerRenderer
from .state import SpinnerSnapshot
from .theme import SPINNER_FRAMES, SpinnerStyle, Theme, get_default_theme

logger = logging.getLogger(__name__)


class Spinner:
    """Looping spinner with optional text."""

    def __init__(
        self,
        style: SpinnerStyle | str = SpinnerStyle.DOTS,
        *,
        text: str = "",
        color: Optional[str] = None,
        interval: Optional[float] = None,
        prefix: str = "",
        suffix: str = "",
        terminal: Optional[Terminal] = None,
        theme: Optional[Theme] = None,
    ):
        """
        Initialize the spinner.

        Args:
            style: Frame set; fixed for the spinner's lifetime
            text: Text shown after the glyph
            color: Rich style for the frame (theme spinner color if omitted)
            interval: Seconds between frames (configured default if omitted)
            prefix: Printed before the glyph
            suffix: Printed after the text
            terminal: Output coordinator (process default if omitted)
            theme: Color theme, read once here
        """
        self.style = SpinnerStyle(style)
        self._frames = SPINNER_FRAMES[self.style]
        self._frame_idx = 0
        self.theme = theme or get_default_theme()
        self._renderer = SpinnerRenderer(self.theme)
        self._terminal = terminal or get_default_terminal()

        self._text = text
        self._color = color or self.theme.spinner
        self._prefix = prefix
        self._suffix = suffix
        self._interval = interval or get_display_config().spinner_interval

        self._lock = threading.Lock()
        self._active = False
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def frames(self) -> tuple:
        return self._frames

    @property
    def frame_index(self) -> int:
        with self._lock:
            return self._frame_idx

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._active

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    def set_text(self, text: str) -> None:
        with self._lock:
            self._text = text

    def set_color(self, color: str) -> None:
        with self._lock:
            self._color = color

    def start(self) -> None:
        """Start the animation; does nothing if already running."""
        with self._lock:
            if self._active:
                return
            self._active = True
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._animation_loop,
                args=(stop_event,),
                name=f"spinner-{id(self):x}",
                daemon=True,
            )
            self._thread.start()
        logger.debug(f"Spinner {self.style.value} started")

    def stop(self) -> None:
        """Stop the animation and erase its line; does nothing if stopped."""
        with self._lock:
            if not self._active:
                return
            self._active = False
            if self._stop_event is not None:
                self._stop_event.set()
            self._stop_event = None
            self._thread = None
            self._terminal.write(clear_line_control())
        logger.debug(f"Spinner {self.style.value} stopped")

    def tick(self) -> bool:
        """
        Draw the current frame and advance to the next one.

        Returns:
            False if the spinner is no longer active (nothing drawn)
        """
        with self._lock:
            if not self._active:
                return False
            frame = self._renderer.render(self._snapshot_locked())
            self._terminal.write(clear_line_control(), frame)
            self._frame_idx = (self._frame_idx + 1) % len(self._frames)
            return True

    def snapshot(self) -> SpinnerSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def _snapshot_locked(self) -> SpinnerSnapshot:
        return SpinnerSnapshot(
            frame=self._frames[self._frame_idx],
            text=self._text,
            prefix=self._prefix,
            suffix=self._suffix,
            color=self._color,
        )

    def _animation_loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            if not self.tick():
                return

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()


def spinner_with_timeout(
    style: SpinnerStyle | str,
    text: str,
    timeout: float,
    **kwargs,
) -> Spinner:
    """
    Create a spinner that stops itself ``timeout`` seconds from now.

    The spinner is not started. The deadline races harmlessly with explicit
    ``stop()`` calls since stopping twice is a no-op.
    """
    spinner = Spinner(style, text=text, **kwargs)
    timer = threading.Timer(timeout, spinner.stop)
    timer.daemon = True
    timer.start()
    return spinner


def create_loading_spinner(text: str, **kwargs) -> Spinner:
    return Spinner(SpinnerStyle.DOTS, text=text, color="cyan", interval=0.1, **kwargs)


def create_processing_spinner(text: str, **kwargs) -> Spinner:
    return Spinner(
        SpinnerStyle.CIRCLE, text=text, color="yellow", interval=0.15, **kwargs
    )


def create_waiting_spinner(text: str, **kwargs) -> Spinner:
    return Spinner(
        SpinnerStyle.BOUNCE, text=text, color="magenta", interval=0.2, **kwargs
    )


class MultiSpinner:
    """
    Named registry of spinners.

    Starting more than one spinner on the same terminal is unsupported; this
    registry only keeps lifecycle bookkeeping in one place.
    """

    def __init__(self) -> None:
        self._spinners: Dict[str, Spinner] = {}
        self._lock = threading.Lock()

    def add(self, name: str, spinner: Spinner) -> None:
        with self._lock:
            self._spinners[name] = spinner

    def get(self, name: str) -> Optional[Spinner]:
        with self._lock:
            return self._spinners.get(name)

    def start(self, name: str) -> None:
        spinner = self.get(name)
        if spinner is not None:
            spinner.start()

    def stop(self, name: str) -> None:
        spinner = self.get(name)
        if spinner is not None:
            spinner.stop()

    def stop_all(self) -> None:
        with self._lock:
            spinners = list(self._spinners.values())
        for spinner in spinners:
            spinner.stop()

    def remove(self, name: str) -> None:
        with self._lock:
            spinner = self._spinners.pop(name, None)
        if spinner is not None:
            spinner.stop()
