"""
Display accessors for player records.

Imported player data does not always use the same field names, so each
accessor walks an ordered list of candidate fields and returns the first
usable value.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from hockeyapp.core.utils import parse_date

NAME_FIELDS = ("name", "playerName", "fullName")
POSITION_FIELDS = ("position", "playerPosition", "pos")
AGE_FIELDS = ("age", "playerAge")
BIRTHDATE_FIELDS = ("dateOfBirth", "dob", "birthDate", "date_of_birth")

UNKNOWN_PLAYER = "Unknown Player"
NO_POSITION = "No Position"


def _first(player: Mapping[str, Any], fields: tuple[str, ...]) -> Any:
    for field in fields:
        value = player.get(field)
        if value is not None and value != "":
            return value
    return None


def player_name(player: Mapping[str, Any]) -> str:
    value = _first(player, NAME_FIELDS)
    if value:
        return str(value)
    joined = f"{player.get('firstName') or ''} {player.get('lastName') or ''}".strip()
    return joined or UNKNOWN_PLAYER


def player_position(player: Mapping[str, Any]) -> str:
    value = _first(player, POSITION_FIELDS)
    return str(value) if value else NO_POSITION


def age_from_birthdate(value: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """Whole years between ``value`` and ``today``; None when the date cannot be parsed."""
    born = parse_date(value)
    if born is None:
        return None
    today = today or date.today()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def player_age(player: Mapping[str, Any], today: Optional[date] = None) -> Optional[int | str]:
    explicit = _first(player, AGE_FIELDS)
    if explicit is not None:
        return explicit
    for field in BIRTHDATE_FIELDS:
        if player.get(field):
            age = age_from_birthdate(player[field], today)
            if age is not None:
                return age
    return None
