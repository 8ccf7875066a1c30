from __future__ import annotations

import pytest

from hockeyapp.core.errors import ValidationError
from hockeyapp.domain import keys
from hockeyapp.services.user_service import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    UserNotFoundError,
    UserService,
)


@pytest.fixture()
def svc(storage):
    return UserService(storage)


def test_register_returns_user_without_password(svc, storage):
    user = svc.register("coach1", "secret", "coach@example.com")

    assert "password" not in user
    assert user["role"] == "user"
    assert user["id"] and user["createdAt"].endswith("Z")
    stored = storage.get(keys.USERS)
    assert stored[0]["password"] == "secret"


def test_duplicate_username_leaves_directory_unchanged(svc, storage):
    svc.register("coach1", "secret", "coach@example.com")
    with pytest.raises(DuplicateUsernameError):
        svc.register("coach1", "other", "other@example.com")
    assert [u["username"] for u in storage.get(keys.USERS)] == ["coach1"]


def test_username_match_is_case_sensitive(svc):
    svc.register("coach1", "secret", "coach@example.com")
    assert svc.register("Coach1", "secret", "c2@example.com")["username"] == "Coach1"


def test_register_rejects_unknown_role(svc):
    with pytest.raises(ValidationError):
        svc.register("coach1", "secret", "coach@example.com", role="owner")


def test_wrong_password_creates_no_session(svc):
    svc.register("coach1", "secret", "coach@example.com")
    with pytest.raises(InvalidCredentialsError):
        svc.authenticate("coach1", "nope")
    assert svc.current_session() is None


def test_authenticate_writes_session_pointer(svc, storage):
    registered = svc.register("coach1", "secret", "coach@example.com")
    session = svc.authenticate("coach1", "secret")

    assert session == {**registered, "team": None, "position": None}
    assert svc.current_session() == session
    assert "password" not in storage.get(keys.CURRENT_USER)


def test_end_session_is_idempotent(svc):
    svc.register("coach1", "secret", "coach@example.com")
    svc.authenticate("coach1", "secret")
    svc.end_session()
    svc.end_session()
    assert svc.current_session() is None


def test_update_user_merges_fields_and_syncs_session(svc, storage):
    user = svc.register("coach1", "secret", "coach@example.com")
    svc.authenticate("coach1", "secret")

    updated = svc.update_user({"id": user["id"], "team": "1", "position": "Coach"})

    assert updated["email"] == "coach@example.com"
    assert updated["team"] == "1"
    assert storage.get(keys.USERS)[0]["password"] == "secret"
    assert svc.current_session()["position"] == "Coach"


def test_update_of_other_user_keeps_session(svc):
    svc.register("admin", "pw", "admin@example.com", role="admin")
    other = svc.register("coach1", "secret", "coach@example.com")
    session = svc.authenticate("admin", "pw")

    svc.update_user({"id": other["id"], "email": "new@example.com"})

    assert svc.current_session() == session


def test_update_unknown_user(svc):
    with pytest.raises(UserNotFoundError):
        svc.update_user({"id": "missing"})


def test_update_requires_id(svc):
    with pytest.raises(ValidationError):
        svc.update_user({"email": "x@example.com"})


def test_update_cannot_take_another_username(svc):
    svc.register("coach1", "secret", "coach@example.com")
    other = svc.register("coach2", "secret", "coach2@example.com")
    with pytest.raises(DuplicateUsernameError):
        svc.update_user({"id": other["id"], "username": "coach1"})


def test_list_and_get_users_hide_passwords(svc):
    user = svc.register("coach1", "secret", "coach@example.com")
    assert all("password" not in u for u in svc.list_users())
    assert svc.get_user(user["id"])["username"] == "coach1"


def test_update_with_padded_id_keeps_stored_id_and_syncs_session(svc, storage):
    user = svc.register("coach1", "secret", "coach@example.com")
    svc.authenticate("coach1", "secret")

    updated = svc.update_user({"id": f" {user['id']} ", "position": "Coach"})

    assert updated["id"] == user["id"]
    assert storage.get(keys.USERS)[0]["id"] == user["id"]
    assert svc.get_user(user["id"])["position"] == "Coach"
    assert svc.current_session()["position"] == "Coach"
