"""Entry point for serving the CRUD Demos API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (see ``crud_demos_api.app.core.config``).  Defaults are
``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from crud_demos_api.app.core.config import settings
from crud_demos_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
