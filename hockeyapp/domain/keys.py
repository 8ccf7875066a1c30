"""Durable storage keys, one per collection plus the session pointer."""
from __future__ import annotations

TEAMS = "hockey_teams"
PLAYERS = "hockey_players"
EVENTS = "hockey_events"
EVENT_REGISTRATIONS = "hockey_event_registrations"
USERS = "hockey_users"
CURRENT_USER = "hockey_current_user"
ANNOUNCEMENTS = "hockey_announcements"
ROLE_REQUESTS = "hockey_role_requests"

ALL_KEYS = (
    TEAMS,
    PLAYERS,
    EVENTS,
    EVENT_REGISTRATIONS,
    USERS,
    CURRENT_USER,
    ANNOUNCEMENTS,
    ROLE_REQUESTS,
)
