"""Background display loop for the stopwatch.

The :class:`DisplayScheduler` owns a single daemon thread that periodically
invokes a ``tick`` callback. The wait between ticks is performed on a
:class:`threading.Event`, which doubles as the cancellation token, so stopping
the scheduler never has to sit out a full interval. A tick that is already in
progress always completes before :meth:`DisplayScheduler.stop` returns.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DisplayScheduler:
    """Run ``tick`` every ``interval()`` seconds until stopped."""

    def __init__(
        self,
        tick: Callable[[], None],
        interval: Callable[[], float],
        *,
        name: str = "stopwatch-display",
    ) -> None:
        self._tick = tick
        self._interval = interval
        self._name = name

        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._lifecycle_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle management
    # ------------------------------------------------------------------
    @property
    def running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive() and not self._stop_event.is_set()

    def start(self) -> None:
        """Start the loop, stopping and joining any previous run first."""

        self.stop()
        with self._lifecycle_lock:
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._run, args=(stop_event,), name=self._name, daemon=True
            )
            self._thread.start()
        logger.debug("display scheduler started")

    def request_stop(self) -> None:
        """Signal the loop to exit without waiting for it."""

        self._stop_event.set()

    def stop(self) -> None:
        """Signal the loop to exit and wait until the thread has finished."""

        with self._lifecycle_lock:
            thread = self._thread
            self._stop_event.set()
            self._thread = None

        if thread is None:
            return
        if thread is threading.current_thread():
            return
        thread.join()
        logger.debug("display scheduler stopped")

    # ------------------------------------------------------------------
    # Worker
    # ------------------------------------------------------------------
    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            try:
                self._tick()
            except Exception:
                logger.exception("display tick failed")
            stop_event.wait(self._interval())


__all__ = ["DisplayScheduler"]
