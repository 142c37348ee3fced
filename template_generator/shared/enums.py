"""Shared enumerations for the template generator.

Cross-cutting enums used by application and infrastructure (audit change
types, normalization modes).
"""

from enum import Enum


class AuditChangeType(str, Enum):
    """Change types recorded in template_audit_logs.change_type."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class NormalizationMode(str, Enum):
    """How far a schema is repaired before handing it to the client."""

    EDIT = "edit"
    RENDER = "render"
