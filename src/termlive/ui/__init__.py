"""
Live terminal widgets.

Progress bars, spinners, live text blocks, stacked bars and step trackers,
all writing through a shared Terminal so each redraw reaches the stream as
one contiguous chunk.
"""

from .core import Terminal, get_default_terminal, set_default_terminal

from .state import (
    ProgressSnapshot,
    SpinnerSnapshot,
    Step,
    StepStatus,
)

from .theme import (
    BAR_STYLES,
    BUILTIN_THEMES,
    SPINNER_FRAMES,
    SpinnerStyle,
    Theme,
    ThemeManager,
    get_default_theme,
    get_theme_manager,
    set_default_theme,
)

from .renderers import ProgressStyle

from .progress import (
    ProgressBar,
    arrow_style,
    classic_style,
    dot_style,
    minimal_style,
    modern_style,
)

from .spinner import (
    MultiSpinner,
    Spinner,
    create_loading_spinner,
    create_processing_spinner,
    create_waiting_spinner,
    spinner_with_timeout,
)

from .live import (
    ContentBuilder,
    Live,
    LiveRenderer,
    ProgressBuilder,
    StatusBuilder,
    create_live_progress,
)

from .multi_progress import MultiProgressBar

from .managers import StepObserver, StepTracker

__all__ = [
    "BAR_STYLES",
    "BUILTIN_THEMES",
    "ContentBuilder",
    "Live",
    "LiveRenderer",
    "MultiProgressBar",
    "MultiSpinner",
    "ProgressBar",
    "ProgressBuilder",
    "ProgressSnapshot",
    "ProgressStyle",
    "SPINNER_FRAMES",
    "Spinner",
    "SpinnerSnapshot",
    "SpinnerStyle",
    "StatusBuilder",
    "Step",
    "StepObserver",
    "StepStatus",
    "StepTracker",
    "Terminal",
    "Theme",
    "ThemeManager",
    "arrow_style",
    "classic_style",
    "create_live_progress",
    "create_loading_spinner",
    "create_processing_spinner",
    "create_waiting_spinner",
    "dot_style",
    "get_default_terminal",
    "get_default_theme",
    "get_theme_manager",
    "minimal_style",
    "modern_style",
    "set_default_terminal",
    "set_default_theme",
    "spinner_with_timeout",
]
