"""Template audit log ORM model. Append-only record of template mutations."""

from datetime import datetime
from typing import Any

from sqlalchemy import Connection, DateTime, ForeignKey, String, event, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from template_generator.infrastructure.persistence.database import Base
from template_generator.shared.utils.generators import generate_cuid


class TemplateAuditLog(Base):
    """Template audit entry: change type, actor, snapshot. No update/delete."""

    __tablename__ = "template_audit_logs"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    template_id: Mapped[str] = mapped_column(
        String, ForeignKey("templates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    change_type: Mapped[str] = mapped_column(
        String(50), nullable=False, comment="CREATE, UPDATE, DELETE"
    )
    performed_by: Mapped[str] = mapped_column(String(255), nullable=False)
    diff_json: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=text("now()"), nullable=False
    )


@event.listens_for(TemplateAuditLog, "before_update")
def _prevent_audit_log_updates(
    _mapper: Mapper[Any], _connection: Connection, _target: TemplateAuditLog
) -> None:
    """Audit log entries are append-only; updates are forbidden."""
    raise ValueError("Audit log entries are immutable and cannot be updated.")


@event.listens_for(TemplateAuditLog, "before_delete")
def _prevent_audit_log_deletes(
    _mapper: Mapper[Any], _connection: Connection, _target: TemplateAuditLog
) -> None:
    """Audit log entries are only removed by the template FK cascade."""
    raise ValueError("Audit log entries cannot be deleted.")
