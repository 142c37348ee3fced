"""Health check endpoint: process liveness plus a database round trip."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from template_generator.api.dependencies import DatabaseProbe, get_database_probe
from template_generator.schemas.health import HealthErrorResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _now_iso() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@router.get(
    "",
    response_model=HealthResponse,
    responses={500: {"description": "Database unavailable", "model": HealthErrorResponse}},
)
async def health_check(
    probe: Annotated[DatabaseProbe, Depends(get_database_probe)],
) -> HealthResponse | JSONResponse:
    """Return OK with database status; 500 when the database check raises."""
    try:
        database_ok = await probe()
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        return JSONResponse(
            status_code=500,
            content=HealthErrorResponse(error=str(e), timestamp=_now_iso()).model_dump(),
        )
    return HealthResponse(
        database="OK" if database_ok else "ERROR",
        timestamp=_now_iso(),
    )
