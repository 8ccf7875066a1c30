"""
User directory: registration, authentication, session and profile updates.
"""

from __future__ import annotations

from typing import Optional
import logging

from hockeyapp.core.errors import HockeyError, ValidationError, require_id
from hockeyapp.core.ids import generate_id
from hockeyapp.core.utils import now_iso
from hockeyapp.domain import keys, roles
from hockeyapp.domain.roles import public_user
from hockeyapp.repositories import collections
from hockeyapp.repositories.base import KeyValueStorage
from hockeyapp.services.session_service import SessionStore

logger = logging.getLogger(__name__)


class UserError(HockeyError):
    """Base class for user directory exceptions."""


class DuplicateUsernameError(UserError):
    pass


class InvalidCredentialsError(UserError):
    pass


class UserNotFoundError(UserError):
    pass


class UserService:
    """Handles registration, login, logout and profile edits."""

    def __init__(self, storage: KeyValueStorage, session: Optional[SessionStore] = None) -> None:
        self.storage = storage
        self.session = session or SessionStore(storage)
        self.repository = collections.users(storage)

    # -------------------------------------- lookups --------------------------------------
    def list_users(self) -> list[dict]:
        return [public_user(u) for u in self.repository.list()]

    def get_user(self, user_id: str) -> Optional[dict]:
        user = self.repository.get(user_id)
        return public_user(user) if user else None

    # -------------------------------------- registration --------------------------------------
    def register(self, username: str, password: str, email: str, role: str = roles.USER) -> dict:
        if not isinstance(username, str) or not username:
            raise ValidationError("username is required")
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required")
        role = role or roles.USER
        if role not in roles.ROLES:
            raise ValidationError(f"Unknown role: {role}")
        users = self.repository.list()
        if any(u.get("username") == username for u in users):
            raise DuplicateUsernameError("Username already exists")
        # plaintext, see DESIGN.md
        user = {
            "id": generate_id(),
            "username": username,
            "password": password,
            "email": email,
            "role": role,
            "createdAt": now_iso(),
        }
        self.repository.replace_all([*users, user])
        logger.info("registered user id=%s role=%s", user["id"], role)
        result = dict(user)
        result.pop("password")
        return result

    # -------------------------------------- login --------------------------------------
    def authenticate(self, username: str, password: str) -> dict:
        for user in self.repository.list():
            if user.get("username") == username and user.get("password") == password:
                payload = self.session.set(user)
                logger.info("user id=%s logged in", user.get("id"))
                return payload
        logger.info("failed login attempt")
        raise InvalidCredentialsError("Invalid username or password")

    def current_session(self) -> Optional[dict]:
        return self.session.get()

    def end_session(self) -> None:
        self.session.clear()

    # -------------------------------------- profile --------------------------------------
    def update_user(self, fields: dict) -> dict:
        """
        Merge ``fields`` onto the stored user with the same id.

        Only the keys present in ``fields`` change. If the user holds the
        current session, the session pointer is refreshed in the same write.
        """
        user_id = require_id((fields or {}).get("id"), "User id")
        users = self.repository.list()
        index = next((i for i, u in enumerate(users) if u.get("id") == user_id), None)
        if index is None:
            raise UserNotFoundError("User not found")
        new_username = fields.get("username")
        if new_username is not None and any(
            u.get("username") == new_username and u.get("id") != user_id for u in users
        ):
            raise DuplicateUsernameError("Username already exists")
        merged = {**users[index], **fields, "id": user_id}
        users[index] = merged
        writes = {keys.USERS: users}
        session_payload = self.session.build_payload(merged)
        if session_payload is not None:
            writes[keys.CURRENT_USER] = session_payload
        self.storage.set_many(writes)
        logger.info("updated user id=%s fields=%s", user_id, sorted(k for k in fields if k != "password"))
        return public_user(merged)
