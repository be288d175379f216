"""
Logging setup driven by ``Settings``.

``DEBUG=true`` forces the ``DEBUG`` level, otherwise ``LOG_LEVEL`` is
used.  ``LOG_FILE`` adds a file handler next to the console one.
Handlers are attached to the root logger once per process; the level
is applied on every call so each ``create_app`` gets the level of its
own settings.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated calls do not stack them.
_HANDLER_ATTR = "_crud_demos_handler"


def resolve_level(settings: Settings) -> int:
    """Numeric log level for ``settings``; unknown names mean INFO."""
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    root.setLevel(resolve_level(settings))

    if any(getattr(h, _HANDLER_ATTR, False) for h in root.handlers):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
