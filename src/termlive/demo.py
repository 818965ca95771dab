"""
Walk through every live widget on the current terminal.
"""

import time
from typing import List, Optional

from .ui import (
    MultiProgressBar,
    ProgressBar,
    StatusBuilder,
    StepTracker,
    create_live_progress,
    create_loading_spinner,
    set_default_theme,
)
from .utils import setup_logging

DEMOS = ("progress", "spinner", "live", "multi", "steps")


def demo_progress(delay: float) -> None:
    bar = ProgressBar(
        40, "Downloading", preset="modern", show_speed=True, show_eta=True
    )
    for _ in range(40):
        time.sleep(delay)
        bar.increment()
    bar.finish()


def demo_spinner(delay: float) -> None:
    spinner = create_loading_spinner("Resolving dependencies")
    with spinner:
        time.sleep(delay * 30)
        spinner.set_text("Almost there")
        time.sleep(delay * 15)
    print("Dependencies resolved")


def demo_live(delay: float) -> None:
    renderer, builder = create_live_progress("Sync", 60)
    status = StatusBuilder()
    renderer.add_builder(status)
    with renderer:
        for i in range(60):
            builder.set_progress(i + 1)
            status.set_status("file", f"chunk-{i:03d}.bin")
            status.set_status("remaining", str(59 - i))
            time.sleep(delay)
        renderer.render()
        time.sleep(delay * 5)


def demo_multi(delay: float) -> None:
    multi = MultiProgressBar()
    bars = [
        multi.add_bar(ProgressBar(30, "Fetch  ", width=30)),
        multi.add_bar(ProgressBar(50, "Compile", width=30)),
        multi.add_bar(ProgressBar(20, "Package", width=30)),
    ]
    with multi:
        while not all(bar.completed for bar in bars):
            for bar in bars:
                bar.increment()
            multi.render()
            time.sleep(delay)


def demo_steps(delay: float) -> None:
    tracker = StepTracker("Project setup")
    for key, label in (
        ("fetch", "Fetch template"),
        ("extract", "Extract archive"),
        ("git", "Initialize git"),
    ):
        tracker.add_step(key, label)
    tracker.display()

    tracker.set_step_running("fetch")
    time.sleep(delay * 5)
    tracker.set_step_done("fetch", "template.zip")
    tracker.set_step_done("extract", "12 files")
    tracker.set_step_skipped("git", "already a repository")
    tracker.display()


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point with argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="termlive - live terminal widget demo",
    )
    parser.add_argument(
        "demos",
        nargs="*",
        help=f"Demos to run, any of: {', '.join(DEMOS)} (default: all)",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help="Theme for the widgets (default, dark, light, high-contrast, ...)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.05,
        help="Seconds between demo steps",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log widget lifecycle to stderr",
    )

    args = parser.parse_args(argv)
    unknown = [name for name in args.demos if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")

    setup_logging(verbose=args.verbose)
    if args.theme:
        set_default_theme(args.theme)

    runners = {
        "progress": demo_progress,
        "spinner": demo_spinner,
        "live": demo_live,
        "multi": demo_multi,
        "steps": demo_steps,
    }
    try:
        for name in args.demos or DEMOS:
            runners[name](args.delay)
    except KeyboardInterrupt:
        print("\nInterrupted")


if __name__ == "__main__":
    main()
