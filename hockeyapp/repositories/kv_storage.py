"""
JSON-document persistence adapter.

All keys live in a single JSON object on disk. Writes go to a temporary file
that replaces the document in one ``os.replace`` call, so a failed write
leaves the previous snapshot in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping
import json
import logging
import os
import tempfile
import threading

from hockeyapp.core.errors import StorageError
from hockeyapp.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


class JSONFileStorage(KeyValueStorage):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                db = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Failed to read {self.path}: {exc}") from exc
        if not isinstance(db, dict):
            raise StorageError(f"Unexpected document in {self.path}: expected an object")
        return db

    def _dump(self, db: dict) -> None:
        try:
            payload = json.dumps(db, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Value is not JSON-serializable: {exc}") from exc
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(self.path.parent))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc

    def get(self, key: str) -> Any:
        return self._load().get(key)

    def set_many(self, items: Mapping[str, Any], remove: Iterable[str] = ()) -> None:
        with self._lock:
            db = self._load()
            db.update(items)
            for key in remove:
                db.pop(key, None)
            self._dump(db)
        logger.debug("stored keys=%s removed=%s in %s", sorted(items), sorted(remove), self.path)

    def keys(self) -> list[str]:
        return list(self._load().keys())
