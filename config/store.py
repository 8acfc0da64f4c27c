"""Plain-text persistence of the display interval.

The file holds a single line with the interval in seconds. Loading and saving
never raise: failures come back as result values and the caller decides how
to report them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.timing.stopwatch import DEFAULT_INTERVAL, MAX_INTERVAL, MIN_INTERVAL, is_valid_interval

from .settings import StopwatchSettings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of :meth:`IntervalStore.load`. ``interval`` is always usable."""

    interval: float
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    error: Optional[str] = None


class IntervalStore:
    """Load and save the display interval at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @classmethod
    def from_settings(cls, settings: Optional[StopwatchSettings] = None) -> "IntervalStore":
        settings = settings or get_settings()
        return cls(settings.config_file)

    def load(self) -> LoadResult:
        default = DEFAULT_INTERVAL
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.debug("config read failed: %s", exc)
            return LoadResult(default, f"Unable to open config file for reading: {self.path}")

        tokens = text.split()
        try:
            value = float(tokens[0])
        except (IndexError, ValueError):
            return LoadResult(default, f"Invalid data in config file: {self.path}")

        if not is_valid_interval(value):
            return LoadResult(
                default,
                f"Interval {value:g} in {self.path} is outside "
                f"{MIN_INTERVAL:g}-{MAX_INTERVAL:g} seconds",
            )
        logger.debug("loaded display interval %g from %s", value, self.path)
        return LoadResult(value)

    def save(self, interval: float) -> SaveResult:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(f"{interval:g}\n", encoding="utf-8")
        except OSError as exc:
            return SaveResult(False, f"Unable to open config file for writing: {exc}")
        logger.debug("saved display interval %g to %s", interval, self.path)
        return SaveResult(True)


__all__ = ["IntervalStore", "LoadResult", "SaveResult"]
