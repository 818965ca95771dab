"""
Tests for spinner animation and lifecycle.
"""

from __future__ import annotations

import threading
import time

import pytest

from termlive.ui import (
    SPINNER_FRAMES,
    MultiSpinner,
    Spinner,
    SpinnerStyle,
    create_loading_spinner,
    create_processing_spinner,
    create_waiting_spinner,
    spinner_with_timeout,
)
from termlive.ui.core import CLEAR_LINE


def _wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.mark.parametrize("style", list(SpinnerStyle))
def test_frames_cycle_in_order(style: SpinnerStyle, terminal, stream) -> None:
    """Verify each tick draws the current frame and advances modulo length."""
    frames = SPINNER_FRAMES[style]
    spinner = Spinner(style, text="work", interval=60, terminal=terminal)
    spinner.start()
    try:
        for i in range(len(frames) * 2):
            assert spinner.frame_index == i % len(frames)
            assert spinner.snapshot().frame == frames[i % len(frames)]
            assert spinner.tick()
    finally:
        spinner.stop()

    out = stream.getvalue()
    assert out.startswith(f"{CLEAR_LINE}{frames[0]} work")
    assert out.count(f"{frames[-1]} work") >= 2


def test_tick_when_stopped_draws_nothing(terminal, stream) -> None:
    spinner = Spinner(terminal=terminal)
    assert not spinner.tick()
    assert stream.getvalue() == ""


def test_double_start_runs_one_thread(terminal) -> None:
    spinner = Spinner(interval=60, terminal=terminal)
    spinner.start()
    spinner.start()
    try:
        name = f"spinner-{id(spinner):x}"
        assert sum(1 for t in threading.enumerate() if t.name == name) == 1
    finally:
        spinner.stop()


def test_stop_erases_line_and_ends_thread(terminal, stream) -> None:
    spinner = Spinner(interval=0.01, text="loading", terminal=terminal)
    spinner.start()
    thread = spinner._thread
    assert _wait_for(lambda: "loading" in stream.getvalue())

    spinner.stop()
    thread.join(timeout=1.0)

    assert not thread.is_alive()
    assert not spinner.is_active
    assert stream.getvalue().endswith(CLEAR_LINE)

    written = stream.getvalue()
    spinner.stop()
    assert stream.getvalue() == written


def test_restart_after_stop(terminal, stream) -> None:
    spinner = Spinner(interval=60, terminal=terminal)
    spinner.start()
    spinner.stop()
    spinner.start()
    try:
        assert spinner.is_active
        assert spinner.tick()
    finally:
        spinner.stop()


def test_text_prefix_suffix_and_color(terminal) -> None:
    spinner = Spinner(
        SpinnerStyle.LINE, prefix="[", suffix="]", interval=60, terminal=terminal
    )
    assert spinner.snapshot().color == spinner.theme.spinner
    spinner.set_color("red")
    assert spinner.snapshot().color == "red"

    assert spinner._renderer.render_inline(spinner.snapshot()) == "[|]"
    spinner.set_text("busy")
    assert spinner._renderer.render_inline(spinner.snapshot()) == "[| busy]"


def test_spinner_with_timeout_stops_itself(terminal) -> None:
    spinner = spinner_with_timeout(
        SpinnerStyle.DOTS, "waiting", 0.05, interval=60, terminal=terminal
    )
    spinner.start()
    assert _wait_for(lambda: not spinner.is_active)


def test_factories(terminal) -> None:
    loading = create_loading_spinner("a", terminal=terminal)
    processing = create_processing_spinner("b", terminal=terminal)
    waiting = create_waiting_spinner("c", terminal=terminal)

    assert (loading.style, loading.interval) == (SpinnerStyle.DOTS, 0.1)
    assert (processing.style, processing.interval) == (SpinnerStyle.CIRCLE, 0.15)
    assert (waiting.style, waiting.interval) == (SpinnerStyle.BOUNCE, 0.2)
    assert loading.snapshot().color == "cyan"
    assert processing.snapshot().color == "yellow"
    assert waiting.snapshot().color == "magenta"


def test_multi_spinner_registry(terminal) -> None:
    registry = MultiSpinner()
    registry.add("a", Spinner(interval=60, terminal=terminal))
    registry.add("b", Spinner(interval=60, terminal=terminal))

    registry.start("a")
    registry.start("missing")
    assert registry.get("a").is_active
    assert not registry.get("b").is_active

    registry.stop_all()
    assert not registry.get("a").is_active

    registry.remove("b")
    assert registry.get("b") is None
