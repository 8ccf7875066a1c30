#!/usr/bin/env python3
"""
Wipe every key of the store (users, session, teams, players, events,
registrations, announcements, role requests).

Usage:
  python scripts/clear_storage.py --yes [--reseed]
"""
from __future__ import annotations

import argparse
import sys

from hockeyapp.core.logging_setup import configure_logging
from hockeyapp.repositories.base import open_storage
from hockeyapp.services.bootstrap import bootstrap


def main() -> None:
    ap = argparse.ArgumentParser(description="Clear the hockey app store")
    ap.add_argument("--yes", action="store_true", help="Confirm that all data should be removed")
    ap.add_argument("--reseed", action="store_true", help="Seed the sample data again after clearing")
    args = ap.parse_args()
    if not args.yes:
        raise SystemExit("Refusing to clear storage without --yes")

    configure_logging()
    storage = open_storage()
    removed = storage.keys()
    storage.clear()
    print(f"OK: removed {len(removed)} key(s)")
    if args.reseed:
        seeded = bootstrap(storage)
        print("  Seeded: " + (", ".join(seeded) or "-"))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
