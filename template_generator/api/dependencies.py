"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, adapters and application use
cases. Routes depend only on these dependencies, not on infrastructure
directly; tests swap them through app.dependency_overrides.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Annotated

import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from template_generator.application.interfaces.services import (
    ISchemaGenerator,
    ITextGenerator,
    IWorkbookReader,
)
from template_generator.application.services.schema_generator import SchemaGenerator
from template_generator.application.use_cases.templates import TemplateService
from template_generator.application.use_cases.uploads import ProcessWorkbookUseCase
from template_generator.core.config import Settings, get_settings
from template_generator.infrastructure.external.spreadsheet import SpreadsheetWorkbookReader
from template_generator.infrastructure.external.storage import UploadStorage
from template_generator.infrastructure.external.text_generation import (
    build_text_generator,
)
from template_generator.infrastructure.persistence.database import (
    check_database_connection,
    get_db,
    get_db_transactional,
)
from template_generator.infrastructure.persistence.repositories import (
    ComponentSchemaRepository,
    TemplateAuditLogRepository,
    TemplateRepository,
)

DatabaseProbe = Callable[[], Awaitable[bool]]


def _template_service(db: AsyncSession) -> TemplateService:
    return TemplateService(
        template_repo=TemplateRepository(db),
        component_repo=ComponentSchemaRepository(db),
        audit_repo=TemplateAuditLogRepository(db),
    )


async def get_template_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TemplateService:
    """Template service for read operations."""
    return _template_service(db)


async def get_template_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TemplateService:
    """Template service for create/delete (one transaction per request)."""
    return _template_service(db)


def get_http_client(request: Request) -> httpx.AsyncClient | None:
    """Shared outbound client created in the lifespan (None when lifespan did not run)."""
    return getattr(request.app.state, "http_client", None)


def get_text_generator(
    settings: Annotated[Settings, Depends(get_settings)],
    http_client: Annotated[httpx.AsyncClient | None, Depends(get_http_client)],
) -> ITextGenerator | None:
    if http_client is None:
        return None
    return build_text_generator(settings, http_client)


def get_schema_generator(
    settings: Annotated[Settings, Depends(get_settings)],
    text_generator: Annotated[ITextGenerator | None, Depends(get_text_generator)],
) -> ISchemaGenerator:
    return SchemaGenerator(
        text_generator,
        sample_size=settings.schema_inference_sample_size,
        temperature=settings.text_generation_temperature,
        max_output_tokens=settings.text_generation_max_tokens,
    )


def get_workbook_reader() -> IWorkbookReader:
    return SpreadsheetWorkbookReader()


def get_process_workbook_use_case(
    settings: Annotated[Settings, Depends(get_settings)],
    workbook_reader: Annotated[IWorkbookReader, Depends(get_workbook_reader)],
    schema_generator: Annotated[ISchemaGenerator, Depends(get_schema_generator)],
) -> ProcessWorkbookUseCase:
    return ProcessWorkbookUseCase(
        workbook_reader,
        schema_generator,
        concurrency=settings.schema_inference_concurrency,
    )


def get_upload_storage(
    settings: Annotated[Settings, Depends(get_settings)],
) -> UploadStorage:
    return UploadStorage(settings.uploads_dir)


def get_database_probe() -> DatabaseProbe:
    """SELECT 1 against the configured database."""
    return check_database_connection
