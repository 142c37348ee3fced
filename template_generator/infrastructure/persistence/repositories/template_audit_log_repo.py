"""Template audit log repository. Append-only; implements ITemplateAuditLogRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from template_generator.application.dtos.audit_log import (
    AuditLogEntryCreate,
    AuditLogResult,
)
from template_generator.infrastructure.persistence.models.template_audit_log import (
    TemplateAuditLog,
)
from template_generator.infrastructure.persistence.repositories.base import translate_db_errors


def _orm_to_result(row: TemplateAuditLog) -> AuditLogResult:
    """Map ORM to application DTO."""
    return AuditLogResult(
        id=row.id,
        template_id=row.template_id,
        change_type=row.change_type,
        performed_by=row.performed_by,
        diff_json=row.diff_json,
        created_at=row.created_at,
    )


class TemplateAuditLogRepository:
    """Append-only audit log repository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @translate_db_errors("Failed to write template audit log")
    async def create(self, entry: AuditLogEntryCreate) -> AuditLogResult:
        """Append one audit log entry; return created record."""
        row = TemplateAuditLog(
            template_id=entry.template_id,
            change_type=entry.change_type,
            performed_by=entry.performed_by,
            diff_json=entry.diff_json,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return _orm_to_result(row)

    @translate_db_errors("Failed to fetch template audit log")
    async def list_for_template(self, template_id: str) -> list[AuditLogResult]:
        """List entries for the template, oldest first."""
        result = await self.db.execute(
            select(TemplateAuditLog)
            .where(TemplateAuditLog.template_id == template_id)
            .order_by(TemplateAuditLog.created_at.asc(), TemplateAuditLog.id.asc())
        )
        return [_orm_to_result(r) for r in result.scalars().all()]
