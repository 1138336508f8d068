"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  Each
resource is mounted under its singular entity name, so the person
endpoints live at ``/api/v1/person``.
"""

from fastapi import APIRouter

from .endpoints import person

router = APIRouter()

router.include_router(person.router, prefix="/person", tags=["person"])
