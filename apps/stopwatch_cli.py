from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

import typer

from config.settings import get_settings
from config.store import IntervalStore
from core.timing.stopwatch import MAX_INTERVAL, MIN_INTERVAL, Stopwatch, is_valid_interval

logger = logging.getLogger(__name__)

MENU_ITEMS = (
    "Start/Resume",
    "Pause",
    "Stop",
    "Reset",
    "Display Time",
    "Set Display Interval",
    "Record Lap",
    "Display Laps",
    "Help",
    "Exit",
)
EXIT_CHOICE = len(MENU_ITEMS)
HELP_CHOICE = 9

HELP_LINES = (
    "1. Start and stop timing.",
    "2. Pause and resume timing.",
    "3. Record lap times.",
    "4. View recorded lap times.",
    "5. Change the display update interval.",
    "6. Reset the stopwatch.",
)


app = typer.Typer(add_completion=False)


# --------- Console helpers ----------

def print_menu() -> None:
    typer.echo("\nStopwatch Menu:")
    for number, label in enumerate(MENU_ITEMS, start=1):
        typer.echo(f"{number}. {label}")


def print_help() -> None:
    typer.echo("\nHelp: This stopwatch allows you to:")
    for line in HELP_LINES:
        typer.echo(line)
    typer.echo("Type the number corresponding to each option to use the stopwatch.")


def _ask(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


def get_menu_choice() -> int:
    """Prompt until the user enters an integer in 1..10."""

    while True:
        raw = _ask(f"Enter your choice (1-{EXIT_CHOICE})")
        try:
            choice = int(raw.strip())
        except ValueError:
            choice = 0
        if 1 <= choice <= EXIT_CHOICE:
            return choice
        typer.echo(f"Invalid input. Please enter a number between 1 and {EXIT_CHOICE}.")


def get_valid_interval() -> float:
    """Prompt until the user enters a display interval in range."""

    while True:
        raw = _ask(f"Enter new display interval in seconds ({MIN_INTERVAL:g} to {MAX_INTERVAL:g})")
        try:
            interval = float(raw.strip())
        except ValueError:
            interval = float("nan")
        if is_valid_interval(interval):
            return interval
        typer.echo(
            f"Invalid input. Please enter a number between {MIN_INTERVAL:g} and {MAX_INTERVAL:g}."
        )


def _confirm_reset(stopwatch: Stopwatch) -> None:
    stopwatch.reset(_ask("Are you sure you want to reset the stopwatch? (y/n)"))


def _set_interval(stopwatch: Stopwatch) -> None:
    stopwatch.set_display_interval(get_valid_interval())


def build_actions(stopwatch: Stopwatch) -> Dict[int, Callable[[], object]]:
    return {
        1: stopwatch.start,
        2: stopwatch.pause,
        3: stopwatch.stop,
        4: lambda: _confirm_reset(stopwatch),
        5: stopwatch.display,
        6: lambda: _set_interval(stopwatch),
        7: stopwatch.lap,
        8: stopwatch.show_laps,
        HELP_CHOICE: print_help,
    }


def run_menu(stopwatch: Stopwatch) -> None:
    """Drive ``stopwatch`` from the numbered menu until Exit or end of input."""

    actions = build_actions(stopwatch)
    while True:
        print_menu()
        try:
            choice = get_menu_choice()
            if choice == EXIT_CHOICE:
                return
            actions[choice]()
        except typer.Abort:
            typer.echo("")
            return


# --------- Lifecycle ----------

def load_stopwatch(store: IntervalStore, bar_width: int) -> Stopwatch:
    loaded = store.load()
    if not loaded.ok:
        logger.warning("Error loading config: %s", loaded.error)
        logger.warning("Using default display interval of %g second(s).", loaded.interval)
    return Stopwatch(display_interval=loaded.interval, bar_width=bar_width)


def shutdown(stopwatch: Stopwatch, store: IntervalStore) -> None:
    stopwatch.close()
    saved = store.save(stopwatch.display_interval)
    if not saved.ok:
        logger.error("Error saving config: %s", saved.error)


def _configure_logging(verbose: bool) -> Tuple[logging.Handler, int]:
    """Attach a stderr handler to the root logger; return it with the previous level."""

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[stopwatch] %(levelname)s: %(message)s"))
    root = logging.getLogger()
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler, previous_level


def _restore_logging(handler: logging.Handler, previous_level: int) -> None:
    root = logging.getLogger()
    root.removeHandler(handler)
    root.setLevel(previous_level)


@app.command()
def main(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="File holding the display interval (default: $STOPWATCH_CONFIG_FILE or ./stopwatch_config.txt)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Interactive console stopwatch."""

    handler, previous_level = _configure_logging(verbose)
    try:
        settings = get_settings()
        store = IntervalStore(config) if config else IntervalStore.from_settings(settings)
        stopwatch = load_stopwatch(store, settings.bar_width)

        typer.echo("Welcome to the Stopwatch!")
        typer.echo(f"Type {HELP_CHOICE} for help on how to use the stopwatch.")
        try:
            run_menu(stopwatch)
        finally:
            shutdown(stopwatch, store)
    finally:
        _restore_logging(handler, previous_level)


if __name__ == "__main__":
    app()
