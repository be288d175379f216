"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
demo resources can be served without any configuration at all.
Tests build their own ``Settings`` instance and pass it to
``create_app`` instead of mutating the environment.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "CRUD Demos API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which all resource routers are mounted.  Empty by
    # default so that paths read ``/posts``, ``/memos`` and so on.  Set
    # e.g. API_PREFIX=/api/v1 to version the surface.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Language of user-facing "not found" messages.  ``ja`` and ``en``
    # are available; unknown values fall back to ``ja``.
    locale: str = os.getenv("LOCALE", "ja")

    # How repositories assign identifiers.  ``counter`` never reuses an
    # id; ``length`` assigns ``len(store) + 1`` and can hand out the same
    # id twice once a record has been deleted.
    id_strategy: str = os.getenv("ID_STRATEGY", "counter")

    # Directory where uploaded files are stored.  Relative paths are
    # resolved against the current working directory.
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")

    # When enabled, the file service writes ``metadata.json`` into the
    # upload directory after every create, update and delete.
    files_metadata_snapshot: bool = _env_flag("FILES_METADATA_SNAPSHOT")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
