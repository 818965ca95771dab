"""
State for the UI: step records and immutable widget snapshots.

Snapshots are taken under a widget's lock and handed to renderers, which
never see the live mutable widget.
"""

from dataclasses import dataclass
from enum import Enum


class StepStatus(str, Enum):
    """Status of a tracked step."""

    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"
    ERROR = "error"
    SKIPPED = "skipped"

    @property
    def priority(self) -> int:
        """Display order: pending, running, done, error, skipped."""
        return _STATUS_ORDER[self]

    @property
    def is_terminal(self) -> bool:
        return self in (StepStatus.DONE, StepStatus.ERROR, StepStatus.SKIPPED)


_STATUS_ORDER = {
    StepStatus.PENDING: 0,
    StepStatus.RUNNING: 1,
    StepStatus.DONE: 2,
    StepStatus.ERROR: 3,
    StepStatus.SKIPPED: 4,
}


@dataclass
class Step:
    """A single tracked step."""

    key: str
    label: str
    status: StepStatus = StepStatus.PENDING
    detail: str = ""


@dataclass(frozen=True)
class ProgressSnapshot:
    """Point-in-time view of a progress bar."""

    total: int
    current: int
    description: str
    completed: bool
    started_at: float
    last_updated_at: float

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return self.current / self.total * 100

    @property
    def elapsed(self) -> float:
        """Seconds from construction (or reset) to the last update."""
        return self.last_updated_at - self.started_at


@dataclass(frozen=True)
class SpinnerSnapshot:
    """Point-in-time view of a spinner."""

    frame: str
    text: str = ""
    prefix: str = ""
    suffix: str = ""
    color: str = "cyan"
