"""
Progress bar renderer: description, bar, and optional suffix segments.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from rich.text import Text

from ..formatters import format_eta, format_percent, format_speed
from ..state import ProgressSnapshot
from ..theme import BAR_STYLES, Theme
from .base import BaseRenderer

logger = logging.getLogger(__name__)


class ProgressStyle(BaseModel):
    """Glyphs, colors and suffix toggles of a progress bar.

    Colors left as ``None`` are taken from the widget's theme.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=50, gt=0)
    fill_char: str = "█"
    empty_char: str = "░"
    left_border: str = "["
    right_border: str = "]"
    fill_color: Optional[str] = None
    empty_color: Optional[str] = None
    text_color: Optional[str] = None
    show_percent: bool = True
    show_count: bool = True
    show_speed: bool = False
    show_eta: bool = False

    @classmethod
    def build(
        cls,
        base: Optional["ProgressStyle"] = None,
        preset: Optional[str] = None,
        **options: Any,
    ) -> "ProgressStyle":
        """
        Derive a style from ``base`` with individual options overridden.

        A non-positive integer ``width`` is ignored and the base width kept;
        any other invalid value is rejected by validation.

        Args:
            base: Starting style (defaults to ``ProgressStyle()``)
            preset: Name of a glyph pair in ``BAR_STYLES``
            **options: Any ProgressStyle field

        Raises:
            ValueError: If ``preset`` is not a known bar style
            pydantic.ValidationError: If an option has the wrong type
        """
        values = (base or cls()).model_dump()
        options = {key: value for key, value in options.items() if value is not None}
        if preset is not None:
            if preset not in BAR_STYLES:
                raise ValueError(f"unknown bar style '{preset}'")
            values["fill_char"], values["empty_char"] = BAR_STYLES[preset]

        width = options.get("width")
        if isinstance(width, int) and width <= 0:
            logger.debug(f"Ignoring non-positive bar width {width}")
            options.pop("width")

        values.update(options)
        return cls(**values)


class ProgressRenderer(BaseRenderer):
    """Render a progress snapshot into a single-line frame."""

    def __init__(self, style: ProgressStyle, theme: Theme):
        super().__init__(theme)
        self.style = style
        self._fill_color = style.fill_color or theme.progress_fill
        self._empty_color = style.empty_color or theme.progress_empty
        self._text_color = style.text_color or theme.progress_text

    def filled_cells(self, percentage: float) -> int:
        width = self.style.width
        filled = int(width * percentage / 100)
        return max(0, min(filled, width))

    def render(self, snapshot: ProgressSnapshot) -> Text:
        """
        Build the frame.

        Suffixes follow in fixed order: percent, count, speed, ETA. Speed and
        ETA average over the whole run since construction, and are omitted
        while no time has elapsed.
        """
        style = self.style
        percentage = snapshot.percentage
        filled = self.filled_cells(percentage)
        empty = style.width - filled

        line = Text()
        if snapshot.description:
            line.append(f"{snapshot.description} ", style=self._text_color)

        line.append(style.left_border)
        if filled > 0:
            line.append(style.fill_char * filled, style=self._fill_color)
        if empty > 0:
            line.append(style.empty_char * empty, style=self._empty_color)
        line.append(style.right_border)

        if style.show_percent:
            line.append(f" {format_percent(percentage)}", style=self._text_color)

        if style.show_count:
            line.append(
                f" ({snapshot.current}/{snapshot.total})", style=self._text_color
            )

        elapsed = snapshot.elapsed
        speed = snapshot.current / elapsed if elapsed > 0 else 0.0

        if style.show_speed and elapsed > 0:
            line.append(f" {format_speed(speed)}", style=self._text_color)

        if (
            style.show_eta
            and not snapshot.completed
            and snapshot.current > 0
            and elapsed > 0
        ):
            remaining = (snapshot.total - snapshot.current) / speed
            line.append(f" ETA: {format_eta(remaining)}", style=self._text_color)

        return line
