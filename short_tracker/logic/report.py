# logic/report.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Mapping, Sequence, Tuple, Union

from short_tracker.logic.penalty import normalize_amount, split_daily_penalty
from short_tracker.models.day_entry import DayEntry
from short_tracker.models.worker import Worker
from short_tracker.utils.date_helper import days_in_month, make_date_key


class _Absent:
    """Marker for a roster worker who did not attend that day."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()

Share = Union[float, _Absent]


@dataclass(frozen=True)
class ReportRow:
    date_key: str
    day: int
    unrecorded: float
    short: float
    unrecorded_penalty: float
    short_penalty: float
    total_penalty: float
    per_person_share: float
    shares: Tuple[Tuple[int, Share], ...]    # (worker_id, share | ABSENT), roster order

    def share_for(self, worker_id: int) -> Share:
        for wid, share in self.shares:
            if wid == worker_id:
                return share
        raise KeyError(worker_id)


@dataclass(frozen=True)
class ReportTotals:
    unrecorded: float
    short: float
    total_penalty: float
    worker_shares: Tuple[Tuple[int, float], ...]

    def share_for(self, worker_id: int) -> float:
        for wid, total in self.worker_shares:
            if wid == worker_id:
                return total
        raise KeyError(worker_id)


@dataclass(frozen=True)
class MonthlyReport:
    year: int
    month: int          # 0 = January
    rows: Tuple[ReportRow, ...]
    totals: ReportTotals

    @property
    def is_empty(self) -> bool:
        return not self.rows


def build_monthly_report(workers: Sequence[Worker], entries: Mapping[str, DayEntry],
                         year: int, month: int) -> MonthlyReport:
    """
    Re-derive every penalty of one month from the raw stored entries.
    - month is zero-based (0 = January)
    - days without an entry, or with both amounts 0, produce no row
    - the split uses the attendance recorded at save time, so ids that have
      since left the roster still count towards the denominator
    - only current roster workers get a share cell, in roster order
    """
    roster = list(workers)
    worker_totals: Dict[int, float] = {w.id: 0.0 for w in roster}
    total_unrecorded = 0.0
    total_short = 0.0
    total_penalty = 0.0
    rows = []

    for d in range(1, days_in_month(year, month) + 1):
        key = make_date_key(year, month, d)
        entry = entries.get(key)
        if entry is None:
            continue

        unrecorded = normalize_amount(entry.unrecorded)
        short = normalize_amount(entry.short)
        if unrecorded <= 0 and short <= 0:
            continue

        present = set(entry.attendance)
        split = split_daily_penalty(unrecorded, short, len(entry.attendance))

        shares = []
        for w in roster:
            if w.id in present:
                shares.append((w.id, split.per_person_share))
                worker_totals[w.id] += split.per_person_share
            else:
                shares.append((w.id, ABSENT))

        total_unrecorded += unrecorded
        total_short += short
        total_penalty += split.total_penalty

        rows.append(ReportRow(
            date_key=key,
            day=d,
            unrecorded=unrecorded,
            short=short,
            unrecorded_penalty=split.unrecorded_penalty,
            short_penalty=split.short_penalty,
            total_penalty=split.total_penalty,
            per_person_share=split.per_person_share,
            shares=tuple(shares),
        ))

    totals = ReportTotals(
        unrecorded=total_unrecorded,
        short=total_short,
        total_penalty=total_penalty,
        worker_shares=tuple((w.id, worker_totals[w.id]) for w in roster),
    )
    return MonthlyReport(year=year, month=month, rows=tuple(rows), totals=totals)
