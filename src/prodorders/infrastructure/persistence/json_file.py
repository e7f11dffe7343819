"""Shared file helpers for the JSON-backed repositories.

Every JSON file gets one process-wide re-entrant lock, so a repository
can hold it across a read-check-write sequence.  Writes go to a temp file
that is then renamed over the original, which keeps the previous content
intact if the process dies mid-write.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

from prodorders.domain.exceptions import StoreError

logger = logging.getLogger(__name__)

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        lock = _locks.get(path)
        if lock is None:
            lock = _locks[path] = threading.RLock()
        return lock


class JsonFile:

    def __init__(self, file_path: Path, empty: Any) -> None:
        self.path = file_path.resolve()
        self.lock = _lock_for(self.path)
        self._empty = empty
        self._ensure_file()

    def load(self) -> Any:
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Cannot read {self.path.name}: {exc}") from exc

    def persist(self, data: Any) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise StoreError(f"Cannot write {self.path.name}: {exc}") from exc
        logger.debug("Wrote %s", self.path)

    def _ensure_file(self) -> None:
        with self.lock:
            if self.path.exists():
                return
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StoreError(f"Cannot create {self.path.parent}: {exc}") from exc
            self.persist(self._empty)
