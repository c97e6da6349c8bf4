import pytest

from short_tracker.cli.menu import main_menu, render_month_summary
from short_tracker.data.data_manager import WORKERS_KEY, load_entries, load_workers
from short_tracker.data.store import MemoryStore
from short_tracker.logic.report import build_monthly_report
from short_tracker.main import main
from short_tracker.models.day_entry import DayEntry


@pytest.fixture
def feed(monkeypatch):
    """Replace input() with a scripted list of answers."""
    def _feed(*answers):
        it = iter(answers)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))
    return _feed


def test_enter_day(store, settings, feed):
    feed("2", "1", "2024-03-01", "120", "1,2", "0", "0")
    main_menu(store, settings)
    assert load_entries(store)["2024-03-01"] == DayEntry(120.0, 0.0, [1, 2])


def test_short_amount_is_asked_only_without_unrecorded(store, settings, feed):
    feed("2", "1", "2024-03-02", "0", "30", "3", "0", "0")
    main_menu(store, settings)
    assert load_entries(store)["2024-03-02"] == DayEntry(0.0, 30.0, [3])


def test_attendance_defaults_to_whole_roster(store, settings, feed):
    feed("2", "1", "2024-03-01", "60", "", "0", "0")
    main_menu(store, settings)
    assert load_entries(store)["2024-03-01"].attendance == [1, 2, 3, 4]


def test_add_and_remove_worker(store, settings, feed, capsys):
    feed("1", "2", "Zed", "3", "2", "y", "0", "0")
    main_menu(store, settings)
    workers = load_workers(store)
    assert [w.name for w in workers] == ["Worker A", "Worker C", "Worker D", "Zed"]
    assert workers[-1].id == 5
    assert "Added Zed (id 5)." in capsys.readouterr().out


def test_cancel_returns_to_main_menu(store, settings, feed, capsys):
    feed("2", "1", "cancel", "0")
    main_menu(store, settings)
    assert "Back to the main menu." in capsys.readouterr().out
    assert load_entries(store) == {}


def test_export_month(store, settings, feed):
    feed("2", "1", "2024-03-01", "120", "1,2", "0", "4", "2024-03", "0")
    main_menu(store, settings)
    assert (settings.export_dir / "Short_Report_3_2024.xlsx").exists()


def test_month_summary_lines(roster, march_entries):
    report = build_monthly_report(roster, march_entries, 2024, 2)
    lines = render_month_summary(report, roster)
    assert lines[0] == "[Mar 2024]"
    assert len(lines) == 3
    assert "03/01/24" in lines[1]
    assert "A: ₱37.50" in lines[1]
    assert lines[2].startswith("TOTAL")


def test_month_summary_off_and_empty(roster):
    report = build_monthly_report(roster, {"2024-03-04": DayEntry(0, 10, [2])}, 2024, 2)
    assert "A: OFF" in render_month_summary(report, roster)[1]
    empty = build_monthly_report(roster, {}, 2024, 2)
    assert render_month_summary(empty, roster) == ["[Mar 2024]", "No entries this month."]


def test_main_cli_with_memory_store(feed, monkeypatch, tmp_path):
    monkeypatch.setenv("SHORT_TRACKER_EXPORT_DIR", str(tmp_path))
    from short_tracker.config.settings import get_settings
    get_settings.cache_clear()
    feed("0")
    try:
        assert main(["--cli", "--memory"]) == 0
    finally:
        get_settings.cache_clear()


def test_export_into_unwritable_location_keeps_menu_running(store, settings, feed, capsys, tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    settings = settings.model_copy(update={"export_dir": blocker})
    feed("4", "2024-03", "0")
    main_menu(store, settings)
    out = capsys.readouterr().out
    assert "Could not write the report" in out
    assert "Saved:" not in out


def test_failed_save_keeps_menu_running(settings, feed, capsys):
    class ReadOnlyStore(MemoryStore):
        def set(self, key, value):
            raise OSError("read-only")

    store = ReadOnlyStore({WORKERS_KEY: [{"id": 1, "name": "Ana"}]})
    feed("2", "1", "2024-03-01", "120", "1", "0")
    main_menu(store, settings)
    assert "Could not save: read-only" in capsys.readouterr().out
    assert load_entries(store) == {}
