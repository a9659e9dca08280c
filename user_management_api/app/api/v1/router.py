"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under a single ``APIRouter`` which
``main.create_app`` mounts under the configured prefix.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
