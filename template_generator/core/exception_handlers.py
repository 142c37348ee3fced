"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error leaves the API as
{"success": false, "error": {"error": message, "status": code, "details"?: ...}}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from template_generator.core.config import get_settings
from template_generator.domain.exceptions import TemplateGeneratorException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "TEMPLATE_ALREADY_EXISTS": 409,
    "WORKBOOK_PROCESSING_ERROR": 500,
    "WORKBOOK_READ_ERROR": 500,
    "UPLOAD_STORAGE_ERROR": 500,
    "UPSTREAM_ERROR": 500,
    "TEXT_GENERATION_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def error_response(
    status: int, message: str, details: Any | None = None
) -> JSONResponse:
    """Build the standard error envelope; details omitted when empty."""
    error: dict[str, Any] = {"error": message, "status": status}
    if details:
        error["details"] = details
    return JSONResponse(
        status_code=status,
        content=jsonable_encoder({"success": False, "error": error}),
    )


def _template_generator_exception_handler(
    request: Request, exc: TemplateGeneratorException
) -> JSONResponse:
    """Return the envelope with the status mapped from exc.error_code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 500)
    if status >= 500:
        logger.error("%s: %s", exc.error_code, exc.to_dict())
    return error_response(status, exc.message, exc.details)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with pydantic error list as details."""
    return error_response(400, "Request validation failed", exc.errors())


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Keep the status; unknown routes read 'Not Found - <path>'."""
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Not Found - {request.url.path}"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message)


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include exception text only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    details = {"reason": str(exc)} if settings.debug else None
    return error_response(500, "Internal Server Error", details)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: TemplateGeneratorException (and subclasses),
    RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(
        TemplateGeneratorException, _template_generator_exception_handler
    )
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
