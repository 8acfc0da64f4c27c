"""Core stopwatch models shared across the project."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RunState(str, Enum):
    """Lifecycle of a stopwatch session."""

    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Lap(BaseModel):
    """A recorded elapsed-time snapshot. ``index`` is 1-based."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1)
    elapsed: float = Field(ge=0.0)


class StopwatchSnapshot(BaseModel):
    """Consistent view of the stopwatch taken while holding its lock."""

    model_config = ConfigDict(frozen=True)

    state: RunState = RunState.STOPPED
    elapsed: float = Field(default=0.0, ge=0.0)
    laps: List[Lap] = Field(default_factory=list)
    display_interval: float = 1.0


__all__ = ["Lap", "RunState", "StopwatchSnapshot"]
