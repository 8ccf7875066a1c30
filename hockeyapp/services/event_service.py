"""Event registration rules (deadline, duplicate team registrations)."""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional
import logging

from hockeyapp.core.errors import HockeyError, require_id
from hockeyapp.core.utils import parse_date
from hockeyapp.repositories import collections
from hockeyapp.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


class EventError(HockeyError):
    """Base exception for event registration."""


class EventNotFoundError(EventError):
    pass


class RegistrationClosedError(EventError):
    pass


class AlreadyRegisteredError(EventError):
    pass


def is_registration_open(event: Mapping[str, Any], today: Optional[date] = None) -> bool:
    """True until the end of the deadline day; events without a readable deadline are closed."""
    deadline = parse_date(event.get("registrationDeadline"))
    if deadline is None:
        return False
    return (today or date.today()) <= deadline


class EventService:
    def __init__(self, storage: KeyValueStorage) -> None:
        self.events = collections.events(storage)
        self.registrations = collections.event_registrations(storage)
        self.teams = collections.teams(storage)

    def get_event(self, event_id: str) -> dict:
        event = self.events.get(event_id)
        if not event:
            raise EventNotFoundError("Event not found")
        return event

    def register_team(self, event_id: str, team_id: str, today: Optional[date] = None) -> dict:
        event = self.get_event(event_id)
        team_id = require_id(team_id, "Team id")
        if not is_registration_open(event, today):
            raise RegistrationClosedError("Registration for this event is closed")
        if self.registrations.exists(eventId=event["id"], teamId=team_id):
            raise AlreadyRegisteredError("Team is already registered for this event")
        registration = self.registrations.save({"eventId": event["id"], "teamId": team_id})
        logger.info("team %s registered for event %s", team_id, event["id"])
        return registration

    def registered_teams(self, event_id: str) -> list[dict]:
        event_id = require_id(event_id, "Event id")
        teams = {t.get("id"): t for t in self.teams.list()}
        rows = []
        for reg in self.registrations.filter(eventId=event_id):
            team = teams.get(reg.get("teamId"))
            rows.append(
                {
                    "id": reg.get("teamId"),
                    "name": team.get("name") if team else "Unknown Team",
                    "category": team.get("category") if team else "Unknown",
                    "registrationDate": reg.get("registrationDate"),
                }
            )
        return rows
