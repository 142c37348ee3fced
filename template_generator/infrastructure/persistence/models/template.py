"""Template ORM model. Named bundle of component schemas."""

from sqlalchemy import Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from template_generator.infrastructure.persistence.database import Base
from template_generator.infrastructure.persistence.models.mixins import SoftDeletableModel


class Template(SoftDeletableModel, Base):
    """Template. Table: templates. Name unique among non-deleted rows (partial index)."""

    __tablename__ = "templates"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index(
            "uq_templates_name_active",
            "name",
            unique=True,
            postgresql_where=text("NOT is_deleted"),
        ),
    )
