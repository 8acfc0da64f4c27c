# config/settings.py
"""
Centralized settings for the stopwatch.

Honors these env vars:
    STOPWATCH_CONFIG_FILE     path of the persisted display interval
    STOPWATCH_BAR_WIDTH       width of the console progress bar

Interval bounds and the default interval belong to the stopwatch itself
(core.timing.stopwatch); they are not configurable here.

Most callers should obtain a cached instance via get_settings().
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from core.timing.formatting import BAR_WIDTH

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "stopwatch_config.txt"


def _env_or_default_config_file() -> Path:
    return Path(os.getenv("STOPWATCH_CONFIG_FILE", DEFAULT_CONFIG_FILE))


def _env_or_default_bar_width() -> int:
    raw = os.getenv("STOPWATCH_BAR_WIDTH")
    if raw is None:
        return BAR_WIDTH
    try:
        width = int(raw)
    except ValueError:
        logger.warning("Ignoring STOPWATCH_BAR_WIDTH=%r: not an integer, using %d", raw, BAR_WIDTH)
        return BAR_WIDTH
    if width < 1:
        logger.warning("Ignoring STOPWATCH_BAR_WIDTH=%r: must be at least 1, using %d", raw, BAR_WIDTH)
        return BAR_WIDTH
    return width


class StopwatchSettings(BaseModel):
    config_file: Path = Field(default_factory=_env_or_default_config_file)
    bar_width: int = Field(default_factory=_env_or_default_bar_width, ge=1)


# ---------- Singleton access ----------

_settings_singleton: Optional[StopwatchSettings] = None


def get_settings(force_refresh: bool = False) -> StopwatchSettings:
    """
    Return a cached StopwatchSettings instance built from the environment.
    """
    global _settings_singleton
    if force_refresh or _settings_singleton is None:
        _settings_singleton = StopwatchSettings()
    return _settings_singleton


__all__ = ["DEFAULT_CONFIG_FILE", "StopwatchSettings", "get_settings"]
