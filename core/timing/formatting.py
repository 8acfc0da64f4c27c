"""Text rendering of elapsed time for the console."""

from __future__ import annotations

BAR_WIDTH = 50
SECONDS_PER_MINUTE = 60


def format_elapsed(seconds: float) -> str:
    """Return ``seconds`` as ``MM:SS.ss``, e.g. ``125.5 -> "02:05.50"``."""

    if seconds < 0:
        seconds = 0.0
    # split on whole hundredths so 59.996 becomes 01:00.00, not 00:60.00
    minutes, hundredths = divmod(round(seconds * 100), SECONDS_PER_MINUTE * 100)
    return f"{minutes:02d}:{hundredths / 100:05.2f}"


def elapsed_line(seconds: float) -> str:
    return f"Elapsed time: {format_elapsed(seconds)}"


def progress_index(seconds: float, width: int = BAR_WIDTH) -> int:
    return int((seconds / SECONDS_PER_MINUTE) * width) % width


def progress_bar(seconds: float, width: int = BAR_WIDTH) -> str:
    """Cyclic one-minute progress bar.

    Cells before the cursor are ``=``, the cursor is ``>`` and the rest are
    blank. The trailing label is the whole seconds within the current minute.
    """

    index = progress_index(seconds, width)
    cells = "=" * index + ">" + " " * (width - index - 1)
    return f"[{cells}] {int(seconds) % SECONDS_PER_MINUTE}s"


__all__ = [
    "BAR_WIDTH",
    "elapsed_line",
    "format_elapsed",
    "progress_bar",
    "progress_index",
]
