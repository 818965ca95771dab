"""
termlive: concurrent live rendering for terminal UIs.
"""

import logging

from .config import DisplayConfig, get_display_config, load_display_config
from .ui import *  # noqa: F401,F403
from .ui import __all__ as _ui_all
from .utils import setup_logging, silence_logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DisplayConfig",
    "get_display_config",
    "load_display_config",
    "setup_logging",
    "silence_logging",
    *_ui_all,
]
