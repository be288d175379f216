"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource (posts, comments, files, memos, tasks,
users, profiles) has a schema module, a service module and an endpoint
module under ``api/v1/endpoints``.  All services share the in-memory
repository defined in ``core/repository.py``.
"""

from .main import app, create_app  # noqa: F401
