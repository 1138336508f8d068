"""Entry point for the DevTalk Person API.

This script launches the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and log level are read from ``devtalk_api.app.core.config``
(``API_HOST``, ``API_PORT`` and ``LOG_LEVEL`` environment variables).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from devtalk_api.app.core.config import settings
from devtalk_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
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
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
