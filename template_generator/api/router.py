"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Mounted under
/api in create_app.
"""

from fastapi import APIRouter

from template_generator.api.endpoints import health, schemas, templates, upload

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(upload.router, prefix="/upload", tags=["upload"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(schemas.router, prefix="/schemas", tags=["schemas"])
