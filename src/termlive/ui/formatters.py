"""
Data formatting utilities for the UI.
"""

import math


def format_eta(seconds: float) -> str:
    """
    Format a remaining duration, truncated to whole seconds.

    Args:
        seconds: Remaining time in seconds

    Returns:
        Compact duration such as ``45s``, ``1m5s`` or ``2h0m3s``
    """
    if not math.isfinite(seconds) or seconds <= 0:
        return "0s"
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    mins, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{mins}m{secs}s"
    if mins:
        return f"{mins}m{secs}s"
    return f"{secs}s"


def format_speed(rate: float) -> str:
    """Format an items-per-second rate."""
    return f"{rate:.1f}/s"


def format_percent(percentage: float) -> str:
    return f"{percentage:.1f}%"


def count_lines(content: str) -> int:
    """
    Number of terminal rows a block of text occupies when written.

    A final line without a trailing newline still counts. Empty content
    occupies no rows.
    """
    if not content:
        return 0
    lines = content.count("\n")
    if not content.endswith("\n"):
        lines += 1
    return lines
