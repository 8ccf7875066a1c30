"""CRUD helpers over one named collection in the key-value store."""
from __future__ import annotations

from typing import Any, Iterable, Optional
import logging

from hockeyapp.core.errors import StorageError, ValidationError, require_id
from hockeyapp.core.ids import generate_id
from hockeyapp.core.utils import now_iso
from hockeyapp.domain import keys
from hockeyapp.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


class CollectionRepository:
    """
    Generic persistence for records carrying an ``id`` field.

    New records are appended unless the repository was built with
    ``prepend=True`` (most-recent-first collections such as announcements).
    Updates replace the stored record wholesale at its original position.
    """

    def __init__(self, storage: KeyValueStorage, key: str, *, prepend: bool = False) -> None:
        self.storage = storage
        self.key = key
        self.prepend = prepend

    # -------------------------- reads --------------------------
    def list(self) -> list[dict]:
        data = self.storage.get(self.key)
        if data is None:
            return []
        if not isinstance(data, list):
            raise StorageError(f"Collection {self.key} is not a list")
        return data

    def get(self, record_id: str) -> Optional[dict]:
        record_id = require_id(record_id)
        for record in self.list():
            if record.get("id") == record_id:
                return record
        return None

    def filter(self, **criteria: Any) -> list[dict]:
        return [r for r in self.list() if all(r.get(k) == v for k, v in criteria.items())]

    def count(self, **criteria: Any) -> int:
        return len(self.filter(**criteria))

    def exists(self, **criteria: Any) -> bool:
        return any(all(r.get(k) == v for k, v in criteria.items()) for r in self.list())

    # -------------------------- writes --------------------------
    def prepare_new(self, record: dict) -> dict:
        """Hook for subclasses to stamp server-assigned fields on new records."""
        return record

    def prepare_update(self, record: dict, existing: dict) -> dict:
        return record

    def save(self, record: dict) -> dict:
        if not isinstance(record, dict):
            raise ValidationError("record must be a mapping")
        records = self.list()
        record_id = record.get("id")
        if record_id is None or record_id == "":
            record = {**record, "id": generate_id()}
        else:
            record = {**record, "id": require_id(record_id)}
        index = next((i for i, r in enumerate(records) if r.get("id") == record["id"]), None)
        if index is not None:
            stored = self.prepare_update(record, records[index])
            records[index] = stored
        else:
            # unknown ids are inserted as new records
            stored = self.prepare_new(record)
            records = [stored, *records] if self.prepend else [*records, stored]
        self.storage.set(self.key, records)
        logger.debug("saved %s id=%s", self.key, stored["id"])
        return stored

    def delete(self, record_id: str) -> bool:
        record_id = require_id(record_id)
        records = self.list()
        remaining = [r for r in records if r.get("id") != record_id]
        if len(remaining) == len(records):
            return False
        self.storage.set(self.key, remaining)
        logger.debug("deleted %s id=%s", self.key, record_id)
        return True

    def replace_all(self, records: Iterable[dict]) -> None:
        self.storage.set(self.key, list(records))


class EventRegistrationRepository(CollectionRepository):
    """Registrations get ``registrationDate`` stamped once, when first saved."""

    def __init__(self, storage: KeyValueStorage) -> None:
        super().__init__(storage, keys.EVENT_REGISTRATIONS)

    def prepare_new(self, record: dict) -> dict:
        record["registrationDate"] = now_iso()
        return record

    def prepare_update(self, record: dict, existing: dict) -> dict:
        if existing.get("registrationDate"):
            record["registrationDate"] = existing["registrationDate"]
        return record


def teams(storage: KeyValueStorage) -> CollectionRepository:
    return CollectionRepository(storage, keys.TEAMS)


def players(storage: KeyValueStorage) -> CollectionRepository:
    return CollectionRepository(storage, keys.PLAYERS)


def events(storage: KeyValueStorage) -> CollectionRepository:
    return CollectionRepository(storage, keys.EVENTS)


def event_registrations(storage: KeyValueStorage) -> EventRegistrationRepository:
    return EventRegistrationRepository(storage)


def announcements(storage: KeyValueStorage) -> CollectionRepository:
    return CollectionRepository(storage, keys.ANNOUNCEMENTS, prepend=True)


def users(storage: KeyValueStorage) -> CollectionRepository:
    return CollectionRepository(storage, keys.USERS)


def role_requests(storage: KeyValueStorage) -> CollectionRepository:
    return CollectionRepository(storage, keys.ROLE_REQUESTS)
