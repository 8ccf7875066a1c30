from __future__ import annotations

from datetime import date

import pytest

from hockeyapp.repositories import collections
from hockeyapp.services.bootstrap import bootstrap
from hockeyapp.services.event_service import (
    AlreadyRegisteredError,
    EventNotFoundError,
    EventService,
    RegistrationClosedError,
    is_registration_open,
)
from hockeyapp.services.team_service import TeamHasPlayersError, TeamService


@pytest.fixture()
def seeded(storage):
    bootstrap(storage)
    return storage


def test_team_with_players_cannot_be_deleted(seeded):
    svc = TeamService(seeded)
    with pytest.raises(TeamHasPlayersError) as excinfo:
        svc.delete_team("1")
    assert excinfo.value.player_count == 1
    assert collections.teams(seeded).get("1") is not None


def test_empty_team_can_be_deleted(seeded):
    svc = TeamService(seeded)
    collections.players(seeded).delete("1")
    assert svc.delete_team("1") is True
    assert collections.teams(seeded).get("1") is None


def test_roster_and_counts(seeded):
    svc = TeamService(seeded)
    collections.players(seeded).save({"firstName": "New", "lastName": "Player", "teamId": "2"})
    assert [p["firstName"] for p in svc.roster("2")] == ["Sarah", "New"]
    assert svc.player_counts()["2"] == 2


def test_registration_window_includes_deadline_day():
    event = {"registrationDeadline": "2025-05-30"}
    assert is_registration_open(event, today=date(2025, 5, 30)) is True
    assert is_registration_open(event, today=date(2025, 5, 31)) is False
    assert is_registration_open({"registrationDeadline": "soon"}, today=date(2025, 1, 1)) is False


def test_register_team_for_open_event(seeded):
    svc = EventService(seeded)
    reg = svc.register_team("1", "2", today=date(2025, 5, 1))

    assert reg["eventId"] == "1" and reg["teamId"] == "2"
    assert reg["registrationDate"]
    with pytest.raises(AlreadyRegisteredError):
        svc.register_team("1", "2", today=date(2025, 5, 1))


def test_register_team_after_deadline(seeded):
    with pytest.raises(RegistrationClosedError):
        EventService(seeded).register_team("1", "2", today=date(2025, 6, 1))


def test_register_team_for_unknown_event(seeded):
    with pytest.raises(EventNotFoundError):
        EventService(seeded).register_team("99", "2", today=date(2025, 1, 1))


def test_registered_teams_fall_back_for_missing_team(seeded):
    svc = EventService(seeded)
    svc.register_team("2", "3", today=date(2025, 6, 1))
    collections.event_registrations(seeded).save({"eventId": "2", "teamId": "gone"})

    rows = svc.registered_teams("2")

    assert rows[0]["name"] == "University of Namibia"
    assert rows[1]["name"] == "Unknown Team"
    assert rows[1]["category"] == "Unknown"
