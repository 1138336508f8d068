"""
Main entrypoint for the DevTalk Person API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory person store and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Run it with
uvicorn or another ASGI server, e.g.::

    uvicorn devtalk_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import PersonStore
from .api.v1.router import router as v1_router


def create_app(store: Optional[PersonStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[PersonStore]
        Store to serve.  When omitted, a fresh store holding the seed
        records is created, so every application starts from the same
        data.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # The store lives exactly as long as the application.
    app.state.person_store = store if store is not None else PersonStore.seeded()
    logging.getLogger(__name__).info(
        "Person store ready with %d records", len(app.state.person_store)
    )

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
