"""Announcements: newest first, written by managers/admins, removed by admins."""
from __future__ import annotations

from typing import Any, Mapping, Optional
import logging

from hockeyapp.core.errors import UnauthorizedError
from hockeyapp.core.utils import now_iso
from hockeyapp.domain.roles import can_create_announcement, can_delete_announcement
from hockeyapp.repositories import collections
from hockeyapp.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


class AnnouncementService:
    def __init__(self, storage: KeyValueStorage) -> None:
        self.repository = collections.announcements(storage)

    def list(self) -> list[dict]:
        return self.repository.list()

    def recent(self, limit: int = 3) -> list[dict]:
        return self.repository.list()[: max(0, limit)]

    def create(self, data: Mapping[str, Any], acting_user: Optional[Mapping[str, Any]]) -> dict:
        if not can_create_announcement(acting_user):
            logger.warning("announcement create refused for role=%r", (acting_user or {}).get("role"))
            raise UnauthorizedError("Only administrators and managers can create announcements")
        announcement = {
            "title": data.get("title"),
            "content": data.get("content"),
            "createdBy": acting_user.get("username"),
            "createdAt": now_iso(),
            "important": bool(data.get("important") or False),
        }
        stored = self.repository.save(announcement)
        logger.info("announcement %s created by %s", stored["id"], stored["createdBy"])
        return stored

    def delete(self, announcement_id: str, acting_user: Optional[Mapping[str, Any]]) -> bool:
        if not can_delete_announcement(acting_user):
            logger.warning("announcement delete refused for role=%r", (acting_user or {}).get("role"))
            raise UnauthorizedError("Only administrators can delete announcements")
        return self.repository.delete(announcement_id)
