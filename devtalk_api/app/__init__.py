"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The project is deliberately small: a single ``Person``
resource used to show how a REST API maps HTTP methods onto CRUD
operations and HTTP status codes onto results.  Routers live in
``api/v1/endpoints``, business logic in ``services`` and the in‑memory
storage in ``core/store.py``.
"""

from .main import app  # noqa: F401
