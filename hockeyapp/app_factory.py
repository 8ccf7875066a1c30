"""Entry point wiring one store into every service."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from hockeyapp.core.config import get_settings
from hockeyapp.core.logging_setup import configure_logging
from hockeyapp.repositories import collections
from hockeyapp.repositories.base import KeyValueStorage, open_storage
from hockeyapp.repositories.collections import CollectionRepository, EventRegistrationRepository
from hockeyapp.services.announcement_service import AnnouncementService
from hockeyapp.services.bootstrap import bootstrap
from hockeyapp.services.event_service import EventService
from hockeyapp.services.role_request_service import RoleRequestService
from hockeyapp.services.session_service import SessionStore
from hockeyapp.services.team_service import TeamService
from hockeyapp.services.user_service import UserService


@dataclass
class HockeyApp:
    """Service handle handed to the UI layer. All services share ``storage`` and ``session``."""

    storage: KeyValueStorage
    session: SessionStore = field(init=False)
    users: UserService = field(init=False)
    role_requests: RoleRequestService = field(init=False)
    announcements: AnnouncementService = field(init=False)
    teams: CollectionRepository = field(init=False)
    players: CollectionRepository = field(init=False)
    events: CollectionRepository = field(init=False)
    event_registrations: EventRegistrationRepository = field(init=False)
    rosters: TeamService = field(init=False)
    event_service: EventService = field(init=False)

    def __post_init__(self):
        self.session = SessionStore(self.storage)
        self.users = UserService(self.storage, self.session)
        self.role_requests = RoleRequestService(self.storage, self.session)
        self.announcements = AnnouncementService(self.storage)
        self.teams = collections.teams(self.storage)
        self.players = collections.players(self.storage)
        self.events = collections.events(self.storage)
        self.event_registrations = collections.event_registrations(self.storage)
        self.rosters = TeamService(self.storage)
        self.event_service = EventService(self.storage)

    def bootstrap(self) -> list[str]:
        return bootstrap(self.storage)


def create_app(storage: Optional[KeyValueStorage] = None, *, seed: Optional[bool] = None) -> HockeyApp:
    settings = get_settings()
    configure_logging()
    app = HockeyApp(storage or open_storage(settings))
    if settings.seed_on_start if seed is None else seed:
        app.bootstrap()
    return app


__all__ = ["HockeyApp", "create_app"]
