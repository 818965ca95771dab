"""
Manager modules for grouped, non-animated displays.
"""

from .step_tracker import StepObserver, StepTracker

__all__ = [
    "StepObserver",
    "StepTracker",
]
