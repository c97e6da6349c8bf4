import pytest

from short_tracker.logic.report import ABSENT, build_monthly_report
from short_tracker.models.day_entry import DayEntry
from short_tracker.models.worker import Worker


class CountingEntries(dict):
    """Records every date key the aggregator looks up."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.looked_up = []

    def get(self, key, default=None):
        self.looked_up.append(key)
        return super().get(key, default)


def test_end_to_end_march(roster, march_entries):
    report = build_monthly_report(roster, march_entries, 2024, 2)

    assert len(report.rows) == 1
    row = report.rows[0]
    assert row.date_key == "2024-03-01"
    assert row.day == 1
    assert row.unrecorded_penalty == 75
    assert row.short_penalty == 0
    assert row.total_penalty == 75
    assert row.per_person_share == 37.5
    assert row.share_for(1) == 37.5
    assert row.share_for(2) == 37.5

    totals = report.totals
    assert totals.unrecorded == 120
    assert totals.short == 0
    assert totals.total_penalty == 75
    assert totals.share_for(1) == 37.5
    assert totals.share_for(2) == 37.5


def test_is_idempotent(roster, march_entries):
    first = build_monthly_report(roster, march_entries, 2024, 2)
    second = build_monthly_report(roster, march_entries, 2024, 2)
    assert first == second


def test_does_not_mutate_inputs(roster, march_entries):
    before = {k: v.to_dict() for k, v in march_entries.items()}
    build_monthly_report(roster, march_entries, 2024, 2)
    assert {k: v.to_dict() for k, v in march_entries.items()} == before
    assert roster == [Worker(1, "A"), Worker(2, "B")]


@pytest.mark.parametrize("year, month, days", [
    (2024, 1, 29),
    (2023, 1, 28),
    (1900, 1, 28),
    (2000, 1, 29),
    (2024, 0, 31),
    (2024, 3, 30),
    (2024, 11, 31),
])
def test_scans_every_day_of_month(year, month, days):
    entries = CountingEntries()
    build_monthly_report([], entries, year, month)
    assert len(entries.looked_up) == days
    assert entries.looked_up[0] == f"{year:04d}-{month + 1:02d}-01"
    assert entries.looked_up[-1] == f"{year:04d}-{month + 1:02d}-{days:02d}"


def test_empty_days_produce_no_rows_and_no_totals(roster):
    entries = {
        "2024-03-05": DayEntry(0, 0, [1, 2]),
        "2024-03-06": DayEntry(0, 0, []),
    }
    report = build_monthly_report(roster, entries, 2024, 2)
    assert report.rows == ()
    assert report.is_empty
    assert report.totals.unrecorded == 0
    assert report.totals.short == 0
    assert report.totals.total_penalty == 0
    assert report.totals.share_for(1) == 0
    assert report.totals.share_for(2) == 0


def test_entries_outside_month_are_ignored(roster):
    entries = {
        "2024-02-29": DayEntry(300, 0, [1]),
        "2024-04-01": DayEntry(300, 0, [1]),
        "2024-03-15": DayEntry(0, 10, [1]),
    }
    report = build_monthly_report(roster, entries, 2024, 2)
    assert [r.date_key for r in report.rows] == ["2024-03-15"]


def test_rows_are_in_ascending_date_order(roster):
    entries = {
        "2024-03-20": DayEntry(60, 0, [1]),
        "2024-03-02": DayEntry(0, 10, [2]),
        "2024-03-11": DayEntry(160, 0, [1, 2]),
    }
    report = build_monthly_report(roster, entries, 2024, 2)
    assert [r.day for r in report.rows] == [2, 11, 20]


def test_absent_is_distinct_from_zero(roster):
    # 30 unrecorded: a reportable day whose penalty is 0
    entries = {"2024-03-03": DayEntry(30, 0, [1])}
    report = build_monthly_report(roster, entries, 2024, 2)
    row = report.rows[0]
    assert row.total_penalty == 0
    assert row.share_for(1) == 0
    assert row.share_for(1) is not ABSENT
    assert row.share_for(2) is ABSENT
    assert report.totals.unrecorded == 30


def test_absent_workers_do_not_accumulate(roster):
    entries = {
        "2024-03-01": DayEntry(120, 0, [1, 2]),
        "2024-03-02": DayEntry(0, 30, [1]),
    }
    report = build_monthly_report(roster, entries, 2024, 2)
    assert report.totals.share_for(1) == 37.5 + 80
    assert report.totals.share_for(2) == 37.5
    assert report.totals.short == 30
    assert report.totals.total_penalty == 155


def test_removed_worker_keeps_historical_denominator(roster):
    # worker 3 was removed after this day was saved
    entries = {"2024-03-01": DayEntry(120, 0, [1, 2, 3])}
    report = build_monthly_report(roster, entries, 2024, 2)
    row = report.rows[0]
    assert [wid for wid, _ in row.shares] == [1, 2]
    assert row.per_person_share == 25
    assert row.share_for(1) == 25
    with pytest.raises(KeyError):
        row.share_for(3)
    assert [wid for wid, _ in report.totals.worker_shares] == [1, 2]


def test_shares_follow_roster_order():
    workers = [Worker(9, "Z"), Worker(2, "B"), Worker(5, "E")]
    entries = {"2024-03-01": DayEntry(0, 10, [5, 9])}
    row = build_monthly_report(workers, entries, 2024, 2).rows[0]
    assert [wid for wid, _ in row.shares] == [9, 2, 5]
    assert row.share_for(2) is ABSENT


def test_no_attendees_day_is_reported_with_zero_share(roster):
    entries = {"2024-03-01": DayEntry(250, 0, [])}
    report = build_monthly_report(roster, entries, 2024, 2)
    row = report.rows[0]
    assert row.total_penalty == 250
    assert row.per_person_share == 0
    assert row.share_for(1) is ABSENT
    assert report.totals.total_penalty == 250


def test_both_amounts_nonzero_sum(roster):
    entries = {"2024-03-01": DayEntry(120, 30, [1, 2])}
    row = build_monthly_report(roster, entries, 2024, 2).rows[0]
    assert row.total_penalty == 155
    assert row.share_for(1) == 77.5


def test_full_precision_is_kept():
    workers = [Worker(1, "A"), Worker(2, "B"), Worker(3, "C")]
    entries = {"2024-03-01": DayEntry(60, 0, [1, 2, 3])}
    report = build_monthly_report(workers, entries, 2024, 2)
    assert report.rows[0].per_person_share == 50 / 3
    assert report.totals.share_for(3) == 50 / 3


@pytest.mark.parametrize("month", [-1, 12, 13])
def test_month_out_of_range(month, roster):
    with pytest.raises(ValueError):
        build_monthly_report(roster, {}, 2024, month)


def test_report_values_are_immutable(roster, march_entries):
    report = build_monthly_report(roster, march_entries, 2024, 2)
    with pytest.raises(AttributeError):
        report.rows[0].total_penalty = 0


def test_absent_marker_repr_and_truthiness():
    assert repr(ABSENT) == "ABSENT"
    assert not ABSENT
