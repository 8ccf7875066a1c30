"""One-off migration script: JSON document (data.json) -> SQL key-value table."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the hockeyapp package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hockeyapp.core.config import get_settings
from hockeyapp.domain import keys
from hockeyapp.repositories.kv_storage import JSONFileStorage
from hockeyapp.repositories.sql_storage import SQLStorage


def migrate(source: Path, include_session: bool = False) -> list[str]:
    """Copy every known collection key from ``source`` into the SQL store in one write."""
    if not source.exists():
        raise SystemExit(f"File not found: {source}")
    json_store = JSONFileStorage(source)
    items = {}
    for key in keys.ALL_KEYS:
        if key == keys.CURRENT_USER and not include_session:
            continue
        value = json_store.get(key)
        if value is not None:
            items[key] = value
    SQLStorage().set_many(items)
    return sorted(items)


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Copy the JSON store into DATABASE_URL")
    ap.add_argument("--source", help="JSON document to read (default: HOCKEY_DATA_FILE)")
    ap.add_argument("--include-session", action="store_true", help="Also copy the logged-in user pointer")
    args = ap.parse_args()
    source = Path(args.source) if args.source else get_settings().data_file
    migrated = migrate(source, include_session=args.include_session)
    print("JSON data migrated to SQL successfully: " + (", ".join(migrated) or "nothing to copy"))
