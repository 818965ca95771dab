"""
Pytest configuration and fixtures.
"""

import io
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest."""
    # Add src to path
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))


def make_console(stream: io.StringIO, tty: bool = True):
    """Console test double: keeps escape sequences, drops colors."""
    from rich.console import Console

    return Console(
        file=stream,
        force_terminal=tty,
        color_system=None,
        width=200,
        highlight=False,
    )


@pytest.fixture(autouse=True)
def isolated_defaults(monkeypatch):
    """Give every test fresh process-wide config, theme and terminal."""
    import termlive.config.display_config as display_config
    import termlive.ui.core.terminal as terminal_module
    import termlive.ui.theme as theme_module

    monkeypatch.setattr(display_config, "_config", display_config.DisplayConfig())
    monkeypatch.setattr(theme_module, "_manager", None)
    monkeypatch.setattr(terminal_module, "_default_terminal", None)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def terminal(stream):
    """Terminal writing to an in-memory stream that claims to be a tty."""
    from termlive.ui.core import Terminal

    return Terminal(make_console(stream))


@pytest.fixture
def plain_terminal(stream):
    """Terminal writing to an in-memory stream that is not a tty."""
    from termlive.ui.core import Terminal

    return Terminal(make_console(stream, tty=False))
