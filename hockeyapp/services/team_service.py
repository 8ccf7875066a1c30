"""Team roster helpers (player counts, guarded deletion)."""

from __future__ import annotations

from collections import Counter
import logging

from hockeyapp.core.errors import HockeyError, require_id
from hockeyapp.repositories import collections
from hockeyapp.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


class TeamError(HockeyError):
    """Base exception for team operations."""


class TeamHasPlayersError(TeamError):
    def __init__(self, team_id: str, player_count: int):
        super().__init__(
            f"This team has {player_count} player(s). Remove all players from the team before deleting it."
        )
        self.team_id = team_id
        self.player_count = player_count


class TeamService:
    def __init__(self, storage: KeyValueStorage) -> None:
        self.teams = collections.teams(storage)
        self.players = collections.players(storage)

    def roster(self, team_id: str) -> list[dict]:
        return self.players.filter(teamId=require_id(team_id, "Team id"))

    def player_counts(self) -> dict[str, int]:
        return dict(Counter(p.get("teamId") for p in self.players.list() if p.get("teamId")))

    def delete_team(self, team_id: str) -> bool:
        team_id = require_id(team_id, "Team id")
        count = self.players.count(teamId=team_id)
        if count:
            raise TeamHasPlayersError(team_id, count)
        removed = self.teams.delete(team_id)
        if removed:
            logger.info("team %s deleted", team_id)
        return removed
