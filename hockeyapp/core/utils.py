"""
Utility helpers shared across repositories/services.
"""

from datetime import date, datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(moment: datetime) -> str:
    """
    Render a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.
    Naive datetimes are treated as UTC.
    """
    normalized = moment.astimezone(timezone.utc) if moment.tzinfo else moment.replace(tzinfo=timezone.utc)
    return normalized.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    return isoformat(utc_now())


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse the leading calendar date of an ISO string (``2025-05-30`` or a full
    timestamp). Returns None for empty or unparseable values.
    """
    raw = (value or "").strip() if isinstance(value, str) else ""
    if len(raw) < 10:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None
