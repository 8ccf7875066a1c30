"""Roles, permission checks and the public projection of a user record."""
from __future__ import annotations

from typing import Any, Mapping, Optional

USER = "user"
MANAGER = "manager"
ADMIN = "admin"

ROLES = (USER, MANAGER, ADMIN)
REQUESTABLE_ROLES = (MANAGER, ADMIN)

PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"


def role_of(user: Optional[Mapping[str, Any]]) -> str:
    if not user:
        return ""
    return str(user.get("role") or "")


def can_create_announcement(user: Optional[Mapping[str, Any]]) -> bool:
    return role_of(user) in (ADMIN, MANAGER)


def can_delete_announcement(user: Optional[Mapping[str, Any]]) -> bool:
    return role_of(user) == ADMIN


def public_user(user: Mapping[str, Any]) -> dict:
    """Return the session-safe view of a user: no password, team/position default to None."""
    return {
        "id": user.get("id"),
        "username": user.get("username"),
        "email": user.get("email"),
        "role": user.get("role"),
        "createdAt": user.get("createdAt"),
        "team": user.get("team") or None,
        "position": user.get("position") or None,
    }
