"""Renderers package exports."""

from .base import BaseRenderer
from .progress import ProgressRenderer, ProgressStyle
from .spinner import SpinnerRenderer
from .step import StepRenderer

__all__ = [
    "BaseRenderer",
    "ProgressRenderer",
    "ProgressStyle",
    "SpinnerRenderer",
    "StepRenderer",
]
