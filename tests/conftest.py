import pytest

from short_tracker.config.settings import AppSettings
from short_tracker.data.store import MemoryStore
from short_tracker.models.day_entry import DayEntry
from short_tracker.models.worker import Worker


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def settings(tmp_path):
    return AppSettings(data_dir=tmp_path / "data", export_dir=tmp_path / "exports")


@pytest.fixture
def roster():
    return [Worker(1, "A"), Worker(2, "B")]


@pytest.fixture
def march_entries():
    return {
        "2024-03-01": DayEntry(unrecorded=120, short=0, attendance=[1, 2]),
        "2024-03-02": DayEntry(unrecorded=0, short=0, attendance=[1, 2]),
    }
