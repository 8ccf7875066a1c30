"""First-run seeding of an empty store."""
from __future__ import annotations

import copy
import logging

from hockeyapp.core.ids import generate_id
from hockeyapp.core.utils import now_iso
from hockeyapp.domain import keys, seed
from hockeyapp.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


def _seed_users() -> list[dict]:
    return [{"id": generate_id(), **seed.DEFAULT_ADMIN, "createdAt": now_iso()}]


def _seed_announcements() -> list[dict]:
    return [{"id": generate_id(), **seed.WELCOME_ANNOUNCEMENT, "createdAt": now_iso()}]


SEEDERS = (
    (keys.USERS, _seed_users),
    (keys.ROLE_REQUESTS, list),
    (keys.TEAMS, lambda: copy.deepcopy(seed.SAMPLE_TEAMS)),
    (keys.PLAYERS, lambda: copy.deepcopy(seed.SAMPLE_PLAYERS)),
    (keys.EVENTS, lambda: copy.deepcopy(seed.SAMPLE_EVENTS)),
    (keys.ANNOUNCEMENTS, _seed_announcements),
)


def bootstrap(storage: KeyValueStorage) -> list[str]:
    """
    Seed every empty collection and leave the others alone.

    Each collection is checked on its own, so re-running after data exists
    is a no-op. Returns the keys that were written.
    """
    seeded = []
    for key, build in SEEDERS:
        current = storage.get(key)
        if current:
            continue
        records = build()
        if current == records:
            continue
        storage.set(key, records)
        seeded.append(key)
    if seeded:
        logger.info("seeded collections: %s", ", ".join(seeded))
    return seeded
