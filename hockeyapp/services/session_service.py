"""Session pointer helpers (who is logged in on this device)."""
from __future__ import annotations

from typing import Any, Mapping, Optional
import logging

from hockeyapp.domain import keys
from hockeyapp.domain.roles import public_user
from hockeyapp.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Holds at most one current-user snapshot under ``hockey_current_user``.

    Services that need to know who is logged in receive this object
    explicitly instead of reading a global.
    """

    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    def get(self) -> Optional[dict]:
        return self.storage.get(keys.CURRENT_USER) or None

    def set(self, user: Mapping[str, Any]) -> dict:
        payload = public_user(user)
        self.storage.set(keys.CURRENT_USER, payload)
        return payload

    def clear(self) -> None:
        self.storage.remove(keys.CURRENT_USER)
        logger.info("session cleared")

    def build_payload(self, user: Mapping[str, Any]) -> Optional[dict]:
        """Return the refreshed pointer for ``user`` if it holds the session, else None."""
        current = self.get()
        if not current or current.get("id") != user.get("id"):
            return None
        return public_user(user)
