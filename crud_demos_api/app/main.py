"""
Main entrypoint for the CRUD Demos API.

This module assembles the FastAPI application, sets up logging,
builds the per-application services and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn crud_demos_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.registry import ServiceRegistry


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call returns an application with its own, empty in-memory
    stores.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``
        instance read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below can
    # safely log messages.
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.services = ServiceRegistry.from_settings(settings)

    # FastAPI rejects prefixes ending in "/".
    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))

    logging.getLogger(__name__).info(
        "Application created (id strategy: %s, locale: %s, upload dir: %s)",
        settings.id_strategy,
        settings.locale,
        settings.upload_dir,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
