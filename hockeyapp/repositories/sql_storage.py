"""Key-value persistence backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping
import json
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from hockeyapp.core.errors import StorageError
from hockeyapp.db.models import KeyValueEntry
from hockeyapp.db.session import Base, get_engine, get_session
from hockeyapp.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


class SQLStorage(KeyValueStorage):
    """Stores each key as one ``kv_entries`` row holding the JSON text of its value."""

    def __init__(self, create_schema: bool = True) -> None:
        if create_schema:
            try:
                Base.metadata.create_all(bind=get_engine())
            except SQLAlchemyError as exc:
                raise StorageError(f"Failed to create storage schema: {exc}") from exc

    def get(self, key: str) -> Any:
        try:
            with get_session() as session:
                entry = session.get(KeyValueEntry, key)
                raw = entry.value if entry else None
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read {key}: {exc}") from exc
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as exc:
            raise StorageError(f"Corrupt value stored under {key}: {exc}") from exc

    def set_many(self, items: Mapping[str, Any], remove: Iterable[str] = ()) -> None:
        try:
            encoded = {key: json.dumps(value, ensure_ascii=False) for key, value in items.items()}
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Value is not JSON-serializable: {exc}") from exc
        removed = list(remove)
        now = datetime.now(timezone.utc)
        try:
            with get_session() as session:
                try:
                    for key, raw in encoded.items():
                        entry = session.get(KeyValueEntry, key)
                        if entry is None:
                            session.add(KeyValueEntry(key=key, value=raw, updated_at=now))
                        else:
                            entry.value = raw
                            entry.updated_at = now
                    if removed:
                        session.execute(delete(KeyValueEntry).where(KeyValueEntry.key.in_(removed)))
                    session.commit()
                except SQLAlchemyError:
                    session.rollback()
                    raise
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to write {sorted(encoded)}: {exc}") from exc
        logger.debug("stored keys=%s removed=%s", sorted(encoded), sorted(removed))

    def keys(self) -> list[str]:
        try:
            with get_session() as session:
                return list(session.execute(select(KeyValueEntry.key)).scalars().all())
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to list keys: {exc}") from exc
