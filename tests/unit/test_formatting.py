# tests/unit/test_formatting.py
import pytest

from core.timing.formatting import elapsed_line, format_elapsed, progress_bar, progress_index


@pytest.mark.parametrize("seconds,expected", [
    (0.0, "00:00.00"),
    (9.5, "00:09.50"),
    (59.0, "00:59.00"),
    (60.0, "01:00.00"),
    (125.5, "02:05.50"),
    (3600.25, "60:00.25"),
])
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected


@pytest.mark.parametrize("seconds,expected", [
    (59.996, "01:00.00"),
    (119.999, "02:00.00"),
    (59.994, "00:59.99"),
])
def test_rounding_carries_into_minutes(seconds, expected):
    assert format_elapsed(seconds) == expected


def test_negative_seconds_clamp_to_zero():
    assert format_elapsed(-3.0) == "00:00.00"


def test_elapsed_line_prefix():
    assert elapsed_line(125.5) == "Elapsed time: 02:05.50"


def test_progress_bar_at_half_minute():
    bar = progress_bar(30.0)
    cells = bar[1:51]

    assert progress_index(30.0) == 25
    assert cells[:25] == "=" * 25
    assert cells[25] == ">"
    assert cells[26:] == " " * 24
    assert bar.endswith("] 30s")


def test_progress_bar_wraps_every_minute():
    assert progress_index(60.0) == 0
    assert progress_index(90.0) == 25
    assert progress_bar(90.0).endswith("] 30s")
    assert progress_bar(59.9).endswith("] 59s")
    assert progress_index(59.9) == 49


def test_progress_bar_custom_width():
    assert progress_bar(30.0, width=10) == "[=====>    ] 30s"
