# data/data_manager.py
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional

import structlog

from short_tracker.data.store import KeyValueStore
from short_tracker.exceptions import InvalidWorkerName
from short_tracker.logic.penalty import normalize_amount
from short_tracker.models.day_entry import DayEntry
from short_tracker.models.worker import Worker

log = structlog.get_logger(__name__)

WORKERS_KEY = "workers"
WORKER_SEQ_KEY = "worker_seq"
ENTRIES_KEY = "entries"

DEFAULT_WORKER_NAMES = ("Worker A", "Worker B", "Worker C", "Worker D")


# ---------- workers ----------
def _worker_from_raw(item: Any) -> Optional[Worker]:
    if not isinstance(item, dict):
        return None
    try:
        w = Worker.from_dict(item)
    except (KeyError, TypeError, ValueError):
        return None
    return w if w.name else None


def load_workers(store: KeyValueStore, default_names: Iterable[str] = DEFAULT_WORKER_NAMES) -> List[Worker]:
    """
    Roster in display order. First launch (no key yet) seeds default_names
    with ids 1..N; an explicitly empty roster stays empty.
    """
    data = store.get(WORKERS_KEY)
    if data is None:
        workers = [Worker(i, name) for i, name in enumerate(default_names, start=1)]
        save_workers(store, workers)
        store.set(WORKER_SEQ_KEY, len(workers))
        log.info("roster_seeded", count=len(workers))
        return workers
    if not isinstance(data, list):
        log.warning("roster_malformed", type=type(data).__name__)
        return []
    workers = []
    for item in data:
        w = _worker_from_raw(item)
        if w is not None:
            workers.append(w)
    return workers


def save_workers(store: KeyValueStore, workers: List[Worker]) -> None:
    store.set(WORKERS_KEY, [w.to_dict() for w in workers])


def next_worker_id(store: KeyValueStore, workers: List[Worker]) -> int:
    """Monotonic: ids of removed workers are never handed out again."""
    seq = store.get(WORKER_SEQ_KEY, 0)
    if not isinstance(seq, int):
        seq = 0
    new_id = max(seq, max((w.id for w in workers), default=0)) + 1
    store.set(WORKER_SEQ_KEY, new_id)
    return new_id


def add_worker(store: KeyValueStore, workers: List[Worker], name: str) -> Worker:
    name = (name or "").strip()
    if not name:
        raise InvalidWorkerName("worker name is empty")
    w = Worker(next_worker_id(store, workers), name)
    # persist first; the caller's list only changes once the store accepted it
    save_workers(store, workers + [w])
    workers.append(w)
    log.info("worker_added", worker_id=w.id, name=w.name)
    return w


def remove_worker(store: KeyValueStore, workers: List[Worker], worker_id: int) -> bool:
    """Past entries keep the id in their attendance list."""
    kept = [w for w in workers if w.id != worker_id]
    if len(kept) == len(workers):
        return False
    save_workers(store, kept)
    workers[:] = kept
    log.info("worker_removed", worker_id=worker_id)
    return True


# ---------- entries ----------
def _entry_from_raw(v: Any) -> Optional[DayEntry]:
    if not isinstance(v, dict):
        return None
    attendance = []
    for i in v.get("attendance") or []:
        try:
            attendance.append(int(i))
        except (TypeError, ValueError):
            continue
    return DayEntry(
        unrecorded=normalize_amount(v.get("unrecorded", 0)),
        short=normalize_amount(v.get("short", 0)),
        attendance=attendance,
    )


def load_entries(store: KeyValueStore) -> Dict[str, DayEntry]:
    data = store.get(ENTRIES_KEY, default={})
    if not isinstance(data, dict):
        log.warning("entries_malformed", type=type(data).__name__)
        return {}
    entries = {}
    for key, raw in data.items():
        entry = _entry_from_raw(raw)
        if entry is None:
            log.warning("entry_skipped", date=key)
            continue
        entries[key] = entry
    return entries


def save_entries(store: KeyValueStore, entries: Dict[str, DayEntry]) -> None:
    store.set(ENTRIES_KEY, {key: e.to_dict() for key, e in entries.items()})


def get_entry(entries: Dict[str, DayEntry], date_key: str) -> Optional[DayEntry]:
    return entries.get(date_key)


def save_entry(store: KeyValueStore, entries: Dict[str, DayEntry], date_key: str, entry: DayEntry) -> None:
    """
    Overwrites the whole day; no partial field updates.
    `entries` only changes after the store accepted the write.
    """
    saved = DayEntry(
        unrecorded=normalize_amount(entry.unrecorded),
        short=normalize_amount(entry.short),
        attendance=entry.attendance,
    )
    updated = dict(entries)
    updated[date_key] = saved
    save_entries(store, updated)
    entries[date_key] = saved
    log.info("entry_saved", date=date_key, unrecorded=saved.unrecorded,
             short=saved.short, attendees=len(saved.attendance))


def delete_entry(store: KeyValueStore, entries: Dict[str, DayEntry], date_key: str) -> bool:
    if date_key not in entries:
        return False
    updated = {k: e for k, e in entries.items() if k != date_key}
    save_entries(store, updated)
    entries.pop(date_key, None)
    log.info("entry_deleted", date=date_key)
    return True
