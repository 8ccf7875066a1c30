"""Process-unique identifier generation."""

from __future__ import annotations

import secrets
import threading
import time

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_RANDOM_LENGTH = 9


class _IdGenerator:
    def __init__(self) -> None:
        self._last_ms = 0
        self._lock = threading.Lock()

    def next(self) -> str:
        now_ms = int(time.time() * 1000)
        with self._lock:
            # strictly increasing even when the clock stalls or steps back
            if now_ms <= self._last_ms:
                now_ms = self._last_ms + 1
            self._last_ms = now_ms
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_RANDOM_LENGTH))
        return f"{now_ms}{suffix}"


_generator = _IdGenerator()


def generate_id() -> str:
    """Return a new id: epoch milliseconds followed by nine random base-36 chars."""
    return _generator.next()
