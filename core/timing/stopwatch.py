"""Thread-safe stopwatch state machine.

A :class:`Stopwatch` accumulates elapsed time across run/pause cycles and
records laps. Every public operation takes the same lock, which is also held
while the call writes its console output, so calls from the menu thread and
renders from the background :class:`~core.timing.display.DisplayScheduler`
are totally ordered.

The scheduler thread is joined only after the lock has been released: the
thread may be blocked on the lock waiting to render, and joining it while
holding the lock would deadlock.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, List, Optional

import typer

from core.models import Lap, RunState, StopwatchSnapshot

from .display import DisplayScheduler
from .formatting import BAR_WIDTH, elapsed_line, progress_bar

logger = logging.getLogger(__name__)

MIN_INTERVAL = 0.1
MAX_INTERVAL = 60.0
DEFAULT_INTERVAL = 1.0

Clock = Callable[[], float]
Echo = Callable[[str], None]
SchedulerFactory = Callable[[Callable[[], None], Callable[[], float]], DisplayScheduler]


def is_valid_interval(seconds: float) -> bool:
    return MIN_INTERVAL <= seconds <= MAX_INTERVAL


class Stopwatch:
    """Start/pause/stop/reset stopwatch with laps and a periodic display."""

    def __init__(
        self,
        *,
        clock: Clock = time.monotonic,
        echo: Echo = typer.echo,
        display_interval: float = DEFAULT_INTERVAL,
        bar_width: int = BAR_WIDTH,
        scheduler_factory: SchedulerFactory = DisplayScheduler,
    ) -> None:
        self._clock = clock
        self._echo = echo
        self._bar_width = bar_width

        self._lock = threading.Lock()
        self._elapsed = 0.0
        self._state = RunState.STOPPED
        self._anchor: Optional[float] = None
        self._laps: List[Lap] = []
        self._display_interval = (
            display_interval if is_valid_interval(display_interval) else DEFAULT_INTERVAL
        )

        self._scheduler = scheduler_factory(self.tick, self._current_interval)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunState:
        with self._lock:
            return self._state

    @property
    def elapsed(self) -> float:
        """Total elapsed seconds, including the running interval if any."""

        with self._lock:
            return self._total_locked()

    @property
    def laps(self) -> List[Lap]:
        with self._lock:
            return list(self._laps)

    @property
    def display_interval(self) -> float:
        return self._current_interval()

    @property
    def scheduler(self) -> DisplayScheduler:
        return self._scheduler

    def snapshot(self) -> StopwatchSnapshot:
        with self._lock:
            return self._snapshot_locked()

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def start(self) -> bool:
        """Start from stopped, or resume from paused.

        Resuming does not restart the periodic display; it only comes back
        with the next start from stopped.
        """

        with self._lock:
            if self._state is RunState.STOPPED:
                self._anchor = self._clock()
                self._state = RunState.RUNNING
                self._echo("Stopwatch started.")
                launch_display = True
            elif self._state is RunState.PAUSED:
                self._anchor = self._clock()
                self._state = RunState.RUNNING
                self._echo("Stopwatch resumed.")
                launch_display = False
            else:
                self._echo("Stopwatch is already running.")
                return False

        if launch_display:
            self._scheduler.start()
        return True

    def pause(self) -> bool:
        with self._lock:
            if self._state is RunState.PAUSED:
                self._echo("Stopwatch is already paused.")
                return False
            if self._state is not RunState.RUNNING:
                self._echo("Stopwatch is not running.")
                return False
            self._accumulate_locked()
            self._state = RunState.PAUSED
            self._scheduler.request_stop()
            self._echo(f"{elapsed_line(self._elapsed)} (Stopwatch paused)")

        self._scheduler.stop()
        return True

    def stop(self) -> bool:
        with self._lock:
            if self._state is not RunState.RUNNING:
                self._echo("Stopwatch is not running.")
                return False
            self._accumulate_locked()
            self._state = RunState.STOPPED
            self._scheduler.request_stop()
            self._echo(f"{elapsed_line(self._elapsed)} (Stopwatch stopped)")

        self._scheduler.stop()
        return True

    def reset(self, answer: str) -> bool:
        """Zero the stopwatch and clear laps if ``answer`` confirms it.

        Only the first non-blank character of ``answer`` is considered; it
        must be ``y`` or ``Y``.
        """

        confirmed = answer.strip()[:1] in ("y", "Y")
        with self._lock:
            if not confirmed:
                self._echo("Reset cancelled.")
                return False
            self._elapsed = 0.0
            self._anchor = None
            self._state = RunState.STOPPED
            self._laps.clear()
            self._scheduler.request_stop()
            self._echo("Stopwatch reset.")

        self._scheduler.stop()
        logger.debug("stopwatch reset")
        return True

    def lap(self) -> Optional[Lap]:
        with self._lock:
            if self._state is not RunState.RUNNING:
                self._echo("Cannot record lap: Stopwatch is not running.")
                return None
            lap = Lap(index=len(self._laps) + 1, elapsed=self._total_locked())
            self._laps.append(lap)
            self._echo(f"Lap {lap.index}: {elapsed_line(lap.elapsed)}")
            return lap

    def set_display_interval(self, seconds: float) -> bool:
        with self._lock:
            if not is_valid_interval(seconds):
                self._echo(
                    f"Invalid interval. Please enter a number between "
                    f"{MIN_INTERVAL:g} and {MAX_INTERVAL:g} seconds."
                )
                return False
            self._display_interval = float(seconds)
            self._echo(f"Display interval set to {seconds:g} seconds.")
            return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def display(self) -> None:
        with self._lock:
            self._render_locked()

    def show_laps(self) -> None:
        with self._lock:
            if not self._laps:
                self._echo("No laps recorded.")
                return
            self._echo("Recorded Laps:")
            for lap in self._laps:
                self._echo(f"Lap {lap.index}: {elapsed_line(lap.elapsed)}")

    def tick(self) -> None:
        """Periodic render; only draws while running."""

        with self._lock:
            if self._state is RunState.RUNNING:
                self._render_locked()

    def close(self) -> None:
        """Stop the background display and wait for it to exit."""

        self._scheduler.stop()

    # ------------------------------------------------------------------
    # Lock-held helpers
    # ------------------------------------------------------------------
    def _current_interval(self) -> float:
        with self._lock:
            return self._display_interval

    def _pending_locked(self) -> float:
        if self._state is not RunState.RUNNING or self._anchor is None:
            return 0.0
        return max(0.0, self._clock() - self._anchor)

    def _total_locked(self) -> float:
        return self._elapsed + self._pending_locked()

    def _accumulate_locked(self) -> None:
        self._elapsed += self._pending_locked()
        self._anchor = None

    def _snapshot_locked(self) -> StopwatchSnapshot:
        return StopwatchSnapshot(
            state=self._state,
            elapsed=self._total_locked(),
            laps=list(self._laps),
            display_interval=self._display_interval,
        )

    def _render_locked(self) -> None:
        snap = self._snapshot_locked()
        self._echo(f"{elapsed_line(snap.elapsed)} ({snap.state.label})")
        self._echo(progress_bar(snap.elapsed, self._bar_width))


__all__ = [
    "DEFAULT_INTERVAL",
    "MAX_INTERVAL",
    "MIN_INTERVAL",
    "Stopwatch",
    "is_valid_interval",
]
