"""
Top-level router for version 1 of the API.

Every resource descriptor gets its own CRUD router mounted under its
name (``/bikes``, ``/fuel``, ...).  When a new resource is added to
``services.resources.RESOURCES`` it is exposed here automatically.
"""

from fastapi import APIRouter

from moto_dash_api.app.services.resources import RESOURCES

from .endpoints import health
from .endpoints.resources import build_resource_router

router = APIRouter()

for descriptor in RESOURCES:
    router.include_router(
        build_resource_router(descriptor),
        prefix=f"/{descriptor.name}",
        tags=[descriptor.name],
    )

router.include_router(health.router, tags=["health"])
