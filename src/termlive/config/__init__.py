"""
Configuration module for display timing and sizing defaults.
"""

from .display_config import (
    DisplayConfig,
    get_display_config,
    load_display_config,
    set_display_config,
)

__all__ = [
    "DisplayConfig",
    "get_display_config",
    "load_display_config",
    "set_display_config",
]
