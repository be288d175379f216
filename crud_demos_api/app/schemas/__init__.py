"""
Pydantic schema definitions for API payloads.

Each resource (posts, comments, files, memos, tasks, users, profiles)
defines its own models for request and response bodies.  ``*Update``
schemas list exactly which fields a client may change.
"""
