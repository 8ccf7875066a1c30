"""
High-level use cases for the hockey app.

Each service module orchestrates repositories to implement business rules
(register and log in, submit and review role requests, publish announcements,
register teams for events, seed a fresh store).

The UI layer should call these services instead of manipulating the key-value
store directly.
"""
