"""
Base renderer class for UI components.
"""

from abc import ABC, abstractmethod
from typing import Any

from rich.text import Text

from ..theme import Theme


class BaseRenderer(ABC):
    """Abstract base class for frame renderers.

    Renderers are pure: they turn a snapshot into styled text and perform no
    I/O and no locking.
    """

    def __init__(self, theme: Theme):
        self.theme = theme

    @abstractmethod
    def render(self, snapshot: Any) -> Text:
        """Render one frame for the given snapshot."""
        pass

    def render_inline(self, snapshot: Any) -> str:
        """Render as the plain string that would be printed."""
        return self.render(snapshot).plain
