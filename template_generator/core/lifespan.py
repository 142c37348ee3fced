"""Application lifespan: startup and shutdown.

Owns the process-wide resources: logging setup, the shared outbound HTTP
client used for text generation, and the SQL engine (disposed on exit).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from template_generator.core.config import get_settings
from template_generator.infrastructure.persistence.database import dispose_engine
from template_generator.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit close the HTTP client and dispose the engine."""
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.text_generation_timeout_seconds
    )
    if not settings.text_generation_api_key.get_secret_value():
        logger.warning(
            "TEXT_GENERATION_API_KEY not set; uploads will use structural schema inference"
        )
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    await dispose_engine()
