"""DTOs for the template audit log (append-only)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class AuditLogEntryCreate:
    """Input for appending one audit log record. Append-only; no update."""

    template_id: str
    change_type: str
    performed_by: str
    diff_json: dict[str, Any]


@dataclass(frozen=True)
class AuditLogResult:
    """Single audit log entry (read-model)."""

    id: str
    template_id: str
    change_type: str
    performed_by: str
    diff_json: dict[str, Any]
    created_at: datetime
