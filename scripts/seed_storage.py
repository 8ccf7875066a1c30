#!/usr/bin/env python3
"""
Seed empty collections with the default admin and the sample teams, players,
events and welcome announcement. Collections that already hold data are left alone.

Usage:
  python scripts/seed_storage.py
  HOCKEY_STORAGE_BACKEND=sql DATABASE_URL=sqlite:///hockey.db python scripts/seed_storage.py
"""
from __future__ import annotations

import argparse
import sys

from hockeyapp.core.logging_setup import configure_logging
from hockeyapp.repositories.base import open_storage
from hockeyapp.services.bootstrap import bootstrap


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed the hockey app store")
    ap.parse_args()
    configure_logging()
    seeded = bootstrap(open_storage())
    if seeded:
        print("OK: seeded " + ", ".join(seeded))
    else:
        print("OK: nothing to seed")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
