"""
UI theme configuration: colors, icons, spinner frames and bar glyphs.

Widgets take a Theme at construction and keep it for their whole lifetime.
The ThemeManager only decides which theme new widgets receive by default, so
switching themes never changes a widget mid-animation.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Dict, List, Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

from ..config import get_display_config
from .state import StepStatus

logger = logging.getLogger(__name__)


class Theme(BaseModel):
    """A named palette of rich style strings."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    is_dark: bool = False

    primary: str = "bold blue"
    secondary: str = "magenta"
    success: str = "green"
    warning: str = "yellow"
    error: str = "red"
    info: str = "cyan"
    text: str = "white"
    text_muted: str = "dim"
    progress_fill: str = "green"
    progress_empty: str = "white dim"
    progress_text: str = "cyan"
    spinner: str = "cyan"

    @field_validator(
        "primary",
        "secondary",
        "success",
        "warning",
        "error",
        "info",
        "text",
        "text_muted",
        "progress_fill",
        "progress_empty",
        "progress_text",
        "spinner",
    )
    @classmethod
    def _valid_style(cls, value: str) -> str:
        try:
            Style.parse(value)
        except StyleSyntaxError as e:
            raise ValueError(f"invalid style {value!r}: {e}") from e
        return value


BUILTIN_THEMES: Dict[str, Theme] = {
    theme.name: theme
    for theme in (
        Theme(name="default", description="Balanced colors for most terminals"),
        Theme(
            name="dark",
            description="For low-light environments",
            is_dark=True,
            text_muted="bright_black",
            progress_fill="bold blue",
            progress_empty="bright_black",
        ),
        Theme(
            name="light",
            description="For bright environments",
            success="bold green",
            warning="bold yellow",
            error="bold red",
            info="blue",
            text="bold black",
            text_muted="black dim",
            progress_fill="bold green",
            progress_empty="black dim",
            progress_text="blue",
            spinner="blue",
        ),
        Theme(
            name="high-contrast",
            description="Maximum contrast for accessibility",
            is_dark=True,
            primary="bold white on blue",
            secondary="bold black on white",
            success="bold white on green",
            warning="bold black on yellow",
            error="bold white on red",
            info="bold white on cyan",
            text="bold white",
            text_muted="white dim",
            progress_fill="bold black on white",
            progress_empty="bold white",
            progress_text="bold white",
            spinner="bold white",
        ),
        Theme(
            name="colorful",
            description="Rich color combinations",
            primary="bold magenta",
            secondary="bold cyan",
            success="bold green",
            warning="bold yellow",
            error="bold red",
            info="bold blue",
            text="bold white",
            text_muted="magenta dim",
            progress_fill="bold magenta",
            progress_empty="cyan dim",
            progress_text="cyan",
            spinner="bold magenta",
        ),
        Theme(
            name="minimal",
            description="Monochrome",
            primary="bold white",
            secondary="white",
            success="bold white",
            warning="bold white",
            error="bold white",
            info="white",
            text_muted="bright_black",
            progress_fill="bold white",
            progress_empty="bright_black",
            progress_text="white",
            spinner="white",
        ),
    )
}


class ThemeObserver(Protocol):
    def on_theme_changed(self, old: Optional[Theme], new: Theme) -> None: ...


class ThemeManager:
    """Registry of themes and the default handed to new widgets."""

    def __init__(self, initial: str = "default") -> None:
        self._lock = threading.Lock()
        self._themes: Dict[str, Theme] = dict(BUILTIN_THEMES)
        self._observers: List[ThemeObserver] = []
        if initial not in self._themes:
            logger.warning(f"Unknown theme '{initial}', falling back to 'default'")
            initial = "default"
        self._current = self._themes[initial]

    @property
    def current(self) -> Theme:
        with self._lock:
            return self._current

    def register(self, theme: Theme) -> None:
        """Register a theme, replacing any theme with the same name."""
        with self._lock:
            self._themes[theme.name] = theme

    def get(self, name: str) -> Theme:
        with self._lock:
            try:
                return self._themes[name]
            except KeyError:
                raise ValueError(f"theme '{name}' not found") from None

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._themes)

    def set_theme(self, name: str) -> Theme:
        """
        Make a registered theme the default and notify observers.

        Observers run synchronously, in registration order, before this returns.

        Raises:
            ValueError: If no theme with that name is registered
        """
        with self._lock:
            if name not in self._themes:
                raise ValueError(f"theme '{name}' not found")
            old = self._current
            self._current = self._themes[name]
            new = self._current
            observers = list(self._observers)

        for observer in observers:
            observer.on_theme_changed(old, new)
        return new

    def add_observer(self, observer: ThemeObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def remove_observer(self, observer: ThemeObserver) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)


_manager: Optional[ThemeManager] = None
_manager_lock = threading.Lock()


def get_theme_manager() -> ThemeManager:
    """Return the process-wide theme manager, initialised once."""
    global _manager
    if _manager is None:
        with _manager_lock:
            if _manager is None:
                _manager = ThemeManager(get_display_config().theme)
    return _manager


def get_default_theme() -> Theme:
    """Theme given to widgets constructed without an explicit one."""
    return get_theme_manager().current


def set_default_theme(name: str) -> Theme:
    return get_theme_manager().set_theme(name)


class SpinnerStyle(str, Enum):
    """Named spinner frame sets."""

    DOTS = "dots"
    LINE = "line"
    CIRCLE = "circle"
    ARROW = "arrow"
    BOUNCE = "bounce"
    CLOCK = "clock"
    MOON = "moon"
    STAR = "star"


SPINNER_FRAMES: Dict[SpinnerStyle, Tuple[str, ...]] = {
    SpinnerStyle.DOTS: ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"),
    SpinnerStyle.LINE: ("|", "/", "-", "\\"),
    SpinnerStyle.CIRCLE: ("◐", "◓", "◑", "◒"),
    SpinnerStyle.ARROW: ("←", "↖", "↑", "↗", "→", "↘", "↓", "↙"),
    SpinnerStyle.BOUNCE: ("⠁", "⠂", "⠄", "⠂"),
    SpinnerStyle.CLOCK: (
        "🕐", "🕑", "🕒", "🕓", "🕔", "🕕", "🕖", "🕗", "🕘", "🕙", "🕚", "🕛",
    ),
    SpinnerStyle.MOON: ("🌑", "🌒", "🌓", "🌔", "🌕", "🌖", "🌗", "🌘"),
    SpinnerStyle.STAR: ("✦", "✧", "✦", "✧"),
}

# (fill, empty) glyph pairs
BAR_STYLES: Dict[str, Tuple[str, str]] = {
    "classic": ("█", "░"),
    "modern": ("▓", "▒"),
    "minimal": ("■", "□"),
    "arrow": ("►", "─"),
    "dot": ("●", "○"),
}

STEP_ICONS: Dict[StepStatus, str] = {
    StepStatus.PENDING: "⏳",
    StepStatus.RUNNING: "🔄",
    StepStatus.DONE: "✅",
    StepStatus.ERROR: "❌",
    StepStatus.SKIPPED: "⏭️",
}


def step_style(theme: Theme, status: StepStatus) -> str:
    """Style used for a step line in the given status."""
    styles = {
        StepStatus.PENDING: theme.warning,
        StepStatus.RUNNING: f"bold {theme.primary}",
        StepStatus.DONE: f"bold {theme.success}",
        StepStatus.ERROR: f"bold {theme.error}",
        StepStatus.SKIPPED: theme.secondary,
    }
    return styles.get(status, theme.text)
