from __future__ import annotations

import pytest

from hockeyapp.core.errors import ValidationError
from hockeyapp.repositories import collections


def test_list_of_missing_collection_is_empty(storage):
    assert collections.teams(storage).list() == []


def test_save_without_id_appends_with_generated_id(storage):
    repo = collections.teams(storage)
    repo.save({"id": "1", "name": "Windhoek Hockey Club"})
    team = repo.save({"name": "Oshakati Hockey Club", "category": "Men", "division": "First"})

    assert team["id"]
    listed = repo.list()
    assert listed[-1] == team
    assert [t for t in listed if t["id"] == team["id"]] == [team]


def test_save_with_existing_id_replaces_whole_record_in_place(storage):
    repo = collections.players(storage)
    first = repo.save({"firstName": "John", "lastName": "Smith", "position": "Forward"})
    second = repo.save({"firstName": "Sarah", "lastName": "Johnson"})

    repo.save({"id": first["id"], "firstName": "Johnny"})

    listed = repo.list()
    assert [p["id"] for p in listed] == [first["id"], second["id"]]
    assert listed[0] == {"id": first["id"], "firstName": "Johnny"}


def test_save_with_unknown_id_inserts_it(storage):
    repo = collections.events(storage)
    repo.save({"id": "42", "title": "Coastal Cup"})
    assert repo.get("42") == {"id": "42", "title": "Coastal Cup"}


def test_delete_missing_id_is_a_no_op(storage):
    repo = collections.events(storage)
    repo.save({"title": "Coaching Workshop"})
    assert repo.delete("does-not-exist") is False
    assert len(repo.list()) == 1


def test_delete_removes_record(storage):
    repo = collections.events(storage)
    event = repo.save({"title": "Coaching Workshop"})
    assert repo.delete(event["id"]) is True
    assert repo.list() == []


@pytest.mark.parametrize("bad_id", ["", "   ", None, 12])
def test_malformed_ids_are_rejected(storage, bad_id):
    repo = collections.teams(storage)
    with pytest.raises(ValidationError):
        repo.delete(bad_id)
    with pytest.raises(ValidationError):
        repo.get(bad_id)


def test_numeric_record_id_is_rejected_on_save(storage):
    with pytest.raises(ValidationError):
        collections.teams(storage).save({"id": 7, "name": "Numbers FC"})


def test_announcements_are_prepended(storage):
    repo = collections.announcements(storage)
    older = repo.save({"title": "Older"})
    newer = repo.save({"title": "Newer"})
    assert [a["id"] for a in repo.list()] == [newer["id"], older["id"]]


def test_registration_date_is_stamped_on_creation_and_kept_on_update(storage):
    repo = collections.event_registrations(storage)
    reg = repo.save({"eventId": "1", "teamId": "2", "registrationDate": "1999-01-01T00:00:00.000Z"})

    assert reg["registrationDate"] != "1999-01-01T00:00:00.000Z"
    assert reg["registrationDate"].endswith("Z")

    updated = repo.save({"id": reg["id"], "eventId": "1", "teamId": "3", "registrationDate": "2000-01-01"})
    assert updated["registrationDate"] == reg["registrationDate"]
    assert repo.list() == [updated]


def test_count_and_filter(storage):
    repo = collections.players(storage)
    repo.save({"firstName": "A", "teamId": "1"})
    repo.save({"firstName": "B", "teamId": "1"})
    repo.save({"firstName": "C", "teamId": "2"})
    assert repo.count(teamId="1") == 2
    assert [p["firstName"] for p in repo.filter(teamId="2")] == ["C"]
    assert repo.exists(teamId="3") is False
