"""Pytest configuration and fixtures for the template generator.

HTTP tests use template_generator.main:app through httpx ASGITransport (the
lifespan does not run, so no outbound HTTP client exists and uploads use
structural schema inference). Template endpoints are exercised against
in-memory repositories via dependency overrides; repository tests against
Postgres skip when DATABASE_URL is not configured.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from template_generator.api.dependencies import (
    get_template_service,
    get_template_service_for_write,
)
from template_generator.application.dtos.audit_log import (
    AuditLogEntryCreate,
    AuditLogResult,
)
from template_generator.application.dtos.template import (
    ComponentDefinition,
    ComponentResult,
    TemplateResult,
)
from template_generator.application.use_cases.templates import TemplateService
from template_generator.domain.exceptions import TemplateAlreadyExistsException
from template_generator.infrastructure.persistence import database
from template_generator.main import app

_BASE_TIME = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


class InMemoryTemplateRepository:
    """ITemplateRepository over a dict; enforces unique names among active rows."""

    def __init__(self) -> None:
        self.rows: dict[str, TemplateResult] = {}
        self._ids = count(1)

    async def list_active(self) -> list[TemplateResult]:
        active = [t for t in self.rows.values() if not t.is_deleted]
        return sorted(active, key=lambda t: t.created_at, reverse=True)

    async def get_active_by_id(self, template_id: str) -> TemplateResult | None:
        row = self.rows.get(template_id)
        return row if row is not None and not row.is_deleted else None

    async def exists_active_by_name(self, name: str) -> bool:
        return any(t.name == name and not t.is_deleted for t in self.rows.values())

    async def create_template(
        self, name: str, description: str | None, created_by: str
    ) -> TemplateResult:
        if await self.exists_active_by_name(name):
            raise TemplateAlreadyExistsException(name)
        n = next(self._ids)
        created_at = _BASE_TIME + timedelta(seconds=n)
        row = TemplateResult(
            id=f"tpl{n}",
            name=name,
            description=description,
            created_by=created_by,
            is_deleted=False,
            created_at=created_at,
            updated_at=created_at,
        )
        self.rows[row.id] = row
        return row

    async def soft_delete(self, template_id: str) -> TemplateResult | None:
        row = await self.get_active_by_id(template_id)
        if row is None:
            return None
        deleted = replace(row, is_deleted=True)
        self.rows[template_id] = deleted
        return deleted


class InMemoryComponentSchemaRepository:
    """IComponentSchemaRepository over a list."""

    def __init__(self) -> None:
        self.rows: list[ComponentResult] = []

    async def create_many(
        self, template_id: str, components: list[ComponentDefinition]
    ) -> list[ComponentResult]:
        created = [
            ComponentResult(
                id=f"{template_id}-c{index}",
                template_id=template_id,
                key=c.key,
                title=c.title,
                schema_json=c.schema_json,
                subcomponents=c.subcomponents_as_dicts(),
                order_index=index,
                is_deleted=False,
                created_at=_BASE_TIME,
                updated_at=_BASE_TIME,
            )
            for index, c in enumerate(components)
        ]
        self.rows.extend(created)
        return created

    async def list_active_for_template(self, template_id: str) -> list[ComponentResult]:
        found = [c for c in self.rows if c.template_id == template_id and not c.is_deleted]
        return sorted(found, key=lambda c: c.order_index)

    async def soft_delete_for_template(self, template_id: str) -> int:
        changed = 0
        for i, c in enumerate(self.rows):
            if c.template_id == template_id and not c.is_deleted:
                self.rows[i] = replace(c, is_deleted=True)
                changed += 1
        return changed


class InMemoryTemplateAuditLogRepository:
    """ITemplateAuditLogRepository over an append-only list."""

    def __init__(self) -> None:
        self.rows: list[AuditLogResult] = []

    async def create(self, entry: AuditLogEntryCreate) -> AuditLogResult:
        row = AuditLogResult(
            id=f"log{len(self.rows) + 1}",
            template_id=entry.template_id,
            change_type=entry.change_type,
            performed_by=entry.performed_by,
            diff_json=entry.diff_json,
            created_at=_BASE_TIME + timedelta(seconds=len(self.rows)),
        )
        self.rows.append(row)
        return row

    async def list_for_template(self, template_id: str) -> list[AuditLogResult]:
        return [r for r in self.rows if r.template_id == template_id]


@pytest.fixture
def template_repo() -> InMemoryTemplateRepository:
    return InMemoryTemplateRepository()


@pytest.fixture
def component_repo() -> InMemoryComponentSchemaRepository:
    return InMemoryComponentSchemaRepository()


@pytest.fixture
def audit_repo() -> InMemoryTemplateAuditLogRepository:
    return InMemoryTemplateAuditLogRepository()


@pytest.fixture
def template_service(template_repo, component_repo, audit_repo) -> TemplateService:
    """TemplateService over in-memory repositories."""
    return TemplateService(
        template_repo=template_repo,
        component_repo=component_repo,
        audit_repo=audit_repo,
    )


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI). Clears overrides afterwards."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def in_memory_templates(template_service: TemplateService) -> TemplateService:
    """Route template endpoints to the in-memory TemplateService."""
    app.dependency_overrides[get_template_service] = lambda: template_service
    app.dependency_overrides[get_template_service_for_write] = lambda: template_service
    return template_service


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after the test.

    Skips when DATABASE_URL is not configured. Apply migrations first:
    alembic upgrade head
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    # Each test runs on its own event loop; do not reuse pooled connections.
    await database.dispose_engine()
