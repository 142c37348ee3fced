"""TemplateAuditLogRepository leaves primary key generation to the model."""

from datetime import UTC, datetime

from template_generator.application.dtos.audit_log import AuditLogEntryCreate
from template_generator.infrastructure.persistence.models.template_audit_log import (
    TemplateAuditLog,
)
from template_generator.infrastructure.persistence.repositories import (
    TemplateAuditLogRepository,
)


class RecordingSession:
    """Stands in for AsyncSession; refresh plays the part of the INSERT defaults."""

    def __init__(self) -> None:
        self.added: list[TemplateAuditLog] = []
        self.ids_at_flush: list[str | None] = []

    def add(self, row: TemplateAuditLog) -> None:
        self.added.append(row)

    async def flush(self) -> None:
        self.ids_at_flush = [row.id for row in self.added]

    async def refresh(self, row: TemplateAuditLog) -> None:
        row.id = "generated-id"
        row.created_at = datetime(2025, 1, 1, tzinfo=UTC)


def test_id_column_has_a_generated_default() -> None:
    default = TemplateAuditLog.__table__.c.id.default
    assert default is not None and default.is_callable


async def test_create_does_not_assign_an_id() -> None:
    session = RecordingSession()
    repo = TemplateAuditLogRepository(session)
    entry = await repo.create(
        AuditLogEntryCreate(
            template_id="tpl-1",
            change_type="CREATE",
            performed_by="00000000-0000-0000-0000-000000000000",
            diff_json={"snapshot": {}},
        )
    )
    assert session.ids_at_flush == [None]
    assert entry.id == "generated-id"
    assert entry.template_id == "tpl-1"
