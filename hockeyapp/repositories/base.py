"""Key-value storage interface and backend selection."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from hockeyapp.core.config import Settings, get_settings
from hockeyapp.core.errors import StorageError


class KeyValueStorage:
    """
    Durable string-keyed storage holding JSON-serializable values.

    Every read returns a fresh copy of the persisted value; there is no cache
    between callers and the medium. ``set_many`` writes all keys in one atomic
    step so multi-collection updates are never half visible.
    """

    def get(self, key: str) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, items: Mapping[str, Any], remove: Iterable[str] = ()) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        self.set_many({}, remove=(key,))

    def keys(self) -> list[str]:
        raise NotImplementedError

    def clear(self) -> None:
        self.set_many({}, remove=self.keys())


def open_storage(settings: Optional[Settings] = None) -> KeyValueStorage:
    """Build the storage backend selected by ``HOCKEY_STORAGE_BACKEND``."""
    settings = settings or get_settings()
    backend = settings.storage_backend
    if backend == "json":
        from hockeyapp.repositories.kv_storage import JSONFileStorage

        return JSONFileStorage(settings.data_file)
    if backend == "sql":
        from hockeyapp.repositories.sql_storage import SQLStorage

        return SQLStorage()
    raise StorageError(f"Unknown storage backend: {backend!r}")
