"""
Core utilities shared across the hockey app.

This package hosts configuration helpers (env vars, storage paths), logging
setup, id generation, time helpers and the base exception types. Services and
repositories depend on these primitives instead of reading os.environ or
building timestamps on their own.
"""
