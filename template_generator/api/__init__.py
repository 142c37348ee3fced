"""HTTP API: routers and dependency composition root."""

from template_generator.api.router import api_router

__all__ = ["api_router"]
