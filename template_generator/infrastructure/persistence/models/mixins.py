"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin, TimestampMixin, SoftDeleteMixin, and the combined
SoftDeletableModel used by templates and component schemas.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from template_generator.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class SoftDeleteMixin:
    """Mixin for soft delete (is_deleted flag). Rows are never hard-deleted."""

    @declared_attr
    def is_deleted(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean,
            nullable=False,
            default=False,
            server_default=text("false"),
            index=True,
        )


class SoftDeletableModel(CuidMixin, TimestampMixin, SoftDeleteMixin):
    """Combined mixin: CUID + created_at/updated_at + is_deleted."""

    __abstract__ = True
