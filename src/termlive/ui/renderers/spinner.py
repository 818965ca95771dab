"""
Spinner renderer: one glyph plus optional text.
"""

from rich.text import Text

from ..state import SpinnerSnapshot
from .base import BaseRenderer


class SpinnerRenderer(BaseRenderer):
    """Renders a spinner frame as ``prefix glyph text suffix``."""

    def render(self, snapshot: SpinnerSnapshot) -> Text:
        if snapshot.text:
            content = f"{snapshot.prefix}{snapshot.frame} {snapshot.text}{snapshot.suffix}"
        else:
            content = f"{snapshot.prefix}{snapshot.frame}{snapshot.suffix}"
        return Text(content, style=snapshot.color or self.theme.spinner)
