"""
Display timing and sizing configuration.

All intervals are in seconds. Values can be overridden through ``TERMLIVE_*``
environment variables (a ``.env`` file in the working directory is honored).
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMLIVE_"


class DisplayConfig(BaseModel):
    """
    Defaults shared by all live widgets.

    Widgets read these once at construction; changing the process-wide config
    later does not affect widgets that already exist.
    """

    model_config = ConfigDict(frozen=True)

    refresh_interval: float = Field(default=0.1, gt=0)
    """Tick period of Live and LiveRenderer animation loops"""

    spinner_interval: float = Field(default=0.1, gt=0)
    """Tick period of Spinner animation loops"""

    bar_width: int = Field(default=50, gt=0)
    """Character width of ProgressBar bars"""

    builder_width: int = Field(default=40, gt=0)
    """Character width of ProgressBuilder bars"""

    theme: str = "default"
    """Name of the theme selected at startup"""


def load_display_config(environ: Optional[Mapping[str, str]] = None) -> DisplayConfig:
    """
    Build a DisplayConfig from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ`` (skips ``.env``)

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    overrides = {}
    for field_name in DisplayConfig.model_fields:
        value = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value is not None and value != "":
            overrides[field_name] = value

    if overrides:
        logger.debug(f"Display config overrides: {overrides}")
    return DisplayConfig(**overrides)


_config: Optional[DisplayConfig] = None
_config_lock = threading.Lock()


def get_display_config() -> DisplayConfig:
    """Return the process-wide configuration, loaded once on first use."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = load_display_config()
    return _config


def set_display_config(config: Optional[DisplayConfig]) -> None:
    """Replace the process-wide configuration (``None`` reloads on next use)."""
    global _config
    with _config_lock:
        _config = config
