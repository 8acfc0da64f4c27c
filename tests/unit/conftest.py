# tests/unit/conftest.py
from typing import Callable, List

import pytest

from core.timing.stopwatch import Stopwatch


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingScheduler:
    """Stands in for DisplayScheduler; records lifecycle calls, runs no thread."""

    def __init__(self, tick: Callable[[], None], interval: Callable[[], float]) -> None:
        self.tick = tick
        self.interval = interval
        self.starts = 0
        self.stops = 0
        self.running = False

    def start(self) -> None:
        self.starts += 1
        self.running = True

    def request_stop(self) -> None:
        self.running = False

    def stop(self) -> None:
        self.stops += 1
        self.running = False


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def output() -> List[str]:
    return []


@pytest.fixture
def make_stopwatch(clock, output):
    def _make(**kwargs) -> Stopwatch:
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("echo", output.append)
        kwargs.setdefault("scheduler_factory", RecordingScheduler)
        return Stopwatch(**kwargs)

    return _make


@pytest.fixture
def stopwatch(make_stopwatch) -> Stopwatch:
    return make_stopwatch()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """
    Keep the environment predictable; the cached settings are rebuilt per test.
    """
    import config.settings as settings_mod

    monkeypatch.delenv("STOPWATCH_CONFIG_FILE", raising=False)
    monkeypatch.delenv("STOPWATCH_BAR_WIDTH", raising=False)
    settings_mod._settings_singleton = None
    yield
    settings_mod._settings_singleton = None
