"""
Step tracking for multi-stage operations.

The tracker holds an ordered set of named steps and prints them as a grouped
list on demand. Observers are told about every status change, synchronously
and in registration order, after the tracker's lock is released.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Dict, List, Optional, Protocol, Union

from rich.text import Text

from ..core import Terminal, get_default_terminal
from ..renderers import StepRenderer
from ..state import Step, StepStatus
from ..theme import Theme, get_default_theme

logger = logging.getLogger(__name__)


class StepObserver(Protocol):
    def on_step_changed(self, step: Step) -> None: ...


class StepTracker:
    """Track and display the status of named steps."""

    def __init__(
        self,
        title: str,
        *,
        terminal: Optional[Terminal] = None,
        theme: Optional[Theme] = None,
    ) -> None:
        self.title = title
        self.theme = theme or get_default_theme()
        self._renderer = StepRenderer(self.theme)
        self._terminal = terminal or get_default_terminal()
        self._lock = threading.Lock()
        self._steps: Dict[str, Step] = {}
        self._observers: List[StepObserver] = []

    def add_step(self, key: str, label: str) -> None:
        """Add a pending step; an existing key is replaced in place."""
        with self._lock:
            self._steps[key] = Step(key=key, label=label)

    def update_step(
        self, key: str, status: Union[StepStatus, str], detail: str = ""
    ) -> None:
        """
        Set a step's status and detail, then notify observers.

        Args:
            key: Step key; unknown keys are ignored
            status: New status
            detail: Replaces the previous detail (empty clears it)

        Raises:
            ValueError: If ``status`` is not a known step status
        """
        status = StepStatus(status)
        with self._lock:
            step = self._steps.get(key)
            if step is None:
                logger.warning(f"Ignoring update for unknown step '{key}'")
                return
            step.status = status
            step.detail = detail
            changed = dataclasses.replace(step)
            observers = list(self._observers)

        for observer in observers:
            observer.on_step_changed(changed)

    def set_step_running(self, key: str, detail: str = "") -> None:
        self.update_step(key, StepStatus.RUNNING, detail)

    def set_step_done(self, key: str, detail: str = "") -> None:
        self.update_step(key, StepStatus.DONE, detail)

    def set_step_error(self, key: str, detail: str = "") -> None:
        self.update_step(key, StepStatus.ERROR, detail)

    def set_step_skipped(self, key: str, detail: str = "") -> None:
        self.update_step(key, StepStatus.SKIPPED, detail)

    def get_step(self, key: str) -> Optional[Step]:
        """Copy of the step, or None if the key is unknown."""
        with self._lock:
            step = self._steps.get(key)
            return dataclasses.replace(step) if step is not None else None

    def steps(self) -> List[Step]:
        """Copies of all steps grouped by status, insertion order within a group."""
        with self._lock:
            steps = [dataclasses.replace(step) for step in self._steps.values()]
        return sorted(steps, key=lambda step: step.status.priority)

    def render(self) -> List[Text]:
        """Header and step lines, without writing them."""
        lines = [self._renderer.render_header(self.title)]
        lines.extend(self._renderer.render(step) for step in self.steps())
        return lines

    def display(self) -> None:
        """Print the title and every step, framed by blank lines."""
        parts: list = ["\n"]
        for line in self.render():
            parts.extend((line, "\n"))
        parts.append("\n")
        self._terminal.write(*parts)

    def add_observer(self, observer: StepObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def remove_observer(self, observer: StepObserver) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def is_completed(self) -> bool:
        """True when no step is pending or running."""
        with self._lock:
            return all(step.status.is_terminal for step in self._steps.values())

    def has_errors(self) -> bool:
        with self._lock:
            return any(
                step.status is StepStatus.ERROR for step in self._steps.values()
            )

    def progress(self) -> float:
        """Percentage of steps that are done, failed or skipped."""
        with self._lock:
            if not self._steps:
                return 0.0
            finished = sum(
                1 for step in self._steps.values() if step.status.is_terminal
            )
            return finished / len(self._steps) * 100

    def reset(self) -> None:
        """Return every step to pending and clear details; steps are kept."""
        with self._lock:
            for step in self._steps.values():
                step.status = StepStatus.PENDING
                step.detail = ""
