"""
Step renderer: status icon, label, and detail for tracker lines.
"""

from rich.text import Text

from ..state import Step
from ..theme import STEP_ICONS, step_style
from .base import BaseRenderer


class StepRenderer(BaseRenderer):
    """Renders one tracked step per line."""

    def render(self, step: Step) -> Text:
        icon = STEP_ICONS.get(step.status, "❓")
        line = Text()
        line.append(f"{icon} {step.label}", style=step_style(self.theme, step.status))
        if step.detail:
            line.append(f" - {step.detail}")
        return line

    def render_header(self, title: str) -> Text:
        return Text(f"=== {title} ===", style=f"bold {self.theme.info}")
