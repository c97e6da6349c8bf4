# data/store.py
from __future__ import annotations
import copy
import json
from pathlib import Path
from typing import Any, Dict

import structlog

log = structlog.get_logger(__name__)


class KeyValueStore:
    """get/set over JSON-compatible values. The only thing the app persists through."""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Dict[str, Any] | None = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)


class JsonFileStore(KeyValueStore):
    """One <key>.json file per key under data_dir."""

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _ensure_data_dir(self):
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def get(self, key: str, default: Any = None) -> Any:
        path = self.path_for(key)
        if not path.exists():
            return default
        try:
            raw = path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            log.warning("store_read_failed", path=str(path), error=str(exc))
            return default
        except UnicodeDecodeError as exc:
            self._quarantine(path, exc)
            return default
        if not raw:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            self._quarantine(path, exc)
            return default

    def _quarantine(self, path: Path, exc: Exception) -> None:
        """Move an unreadable file to <name>.bad so the next set() can't overwrite it."""
        bad = path.with_suffix(path.suffix + ".bad")
        try:
            path.replace(bad)
        except OSError as move_exc:
            log.error("store_quarantine_failed", path=str(path), error=str(move_exc))
            raise
        log.warning("store_read_failed", path=str(path), moved_to=str(bad), error=str(exc))

    def set(self, key: str, value: Any) -> None:
        self._ensure_data_dir()
        path = self.path_for(key)
        # atomic replace
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(path)
        log.debug("store_saved", path=str(path))
