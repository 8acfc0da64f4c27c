# tests/unit/test_store.py
import pytest

from config.settings import StopwatchSettings
from config.store import IntervalStore


@pytest.fixture
def settings(tmp_path):
    return StopwatchSettings(config_file=tmp_path / "stopwatch_config.txt")


@pytest.fixture
def store(settings):
    return IntervalStore.from_settings(settings)


def test_missing_file_falls_back_to_default(store):
    result = store.load()
    assert result.interval == 1.0
    assert not result.ok
    assert "Unable to open config file for reading" in result.error


@pytest.mark.parametrize("content", ["", "abc\n", "  \n\n", "fast 2"])
def test_invalid_content_falls_back_to_default(store, content):
    store.path.write_text(content, encoding="utf-8")
    result = store.load()
    assert result.interval == 1.0
    assert "Invalid data in config file" in result.error


@pytest.mark.parametrize("content", ["0.05\n", "61\n", "-2\n", "nan\n"])
def test_out_of_range_value_falls_back_to_default(store, content):
    store.path.write_text(content, encoding="utf-8")
    result = store.load()
    assert result.interval == 1.0
    assert not result.ok


@pytest.mark.parametrize("content,expected", [
    ("2.5\n", 2.5),
    ("0.1", 0.1),
    ("60\n", 60.0),
    ("  7 trailing junk\n", 7.0),
])
def test_valid_value_is_loaded(store, content, expected):
    store.path.write_text(content, encoding="utf-8")
    result = store.load()
    assert result.ok
    assert result.interval == pytest.approx(expected)


def test_save_writes_single_line(store):
    assert store.save(2.5).ok
    assert store.path.read_text(encoding="utf-8") == "2.5\n"
    assert store.save(60.0).ok
    assert store.path.read_text(encoding="utf-8") == "60\n"
    assert store.load().interval == 60.0


def test_save_creates_parent_directories(tmp_path):
    store = IntervalStore(tmp_path / "nested" / "dir" / "interval.txt")
    assert store.save(3.0).ok
    assert store.load().interval == 3.0


def test_save_failure_is_reported_not_raised(tmp_path):
    target = tmp_path / "is_a_directory"
    target.mkdir()
    result = IntervalStore(target).save(1.0)
    assert result.ok is False
    assert "Unable to open config file for writing" in result.error


@pytest.mark.parametrize("seconds", [0.05, 0.1, 2.5, 60.0, 61.0])
def test_store_accepts_exactly_what_the_stopwatch_accepts(store, make_stopwatch, seconds):
    store.path.write_text(f"{seconds}\n", encoding="utf-8")
    stopwatch = make_stopwatch()

    assert store.load().ok is stopwatch.set_display_interval(seconds)
