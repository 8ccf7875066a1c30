"""Logging setup for scripts and the application container."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from hockeyapp.core.config import get_settings


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(level: str | None = None, structured: bool | None = None) -> None:
    """
    Attach a single stream handler to the ``hockeyapp`` logger.

    Safe to call more than once; the handler is only added the first time.
    """
    settings = get_settings()
    logger = logging.getLogger("hockeyapp")
    logger.setLevel((level or settings.log_level).upper())
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
        logger.propagate = False
    use_json = settings.log_json if structured is None else structured
    for handler in logger.handlers:
        if use_json:
            handler.setFormatter(JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
