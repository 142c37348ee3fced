"""ComponentSchema ORM model. One schema-bearing unit of a template."""

from typing import Any

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from template_generator.infrastructure.persistence.database import Base
from template_generator.infrastructure.persistence.models.mixins import SoftDeletableModel


class ComponentSchema(SoftDeletableModel, Base):
    """Component schema. Table: component_schemas. Subcomponents stored as opaque JSONB."""

    __tablename__ = "component_schemas"

    template_id: Mapped[str] = mapped_column(
        String, ForeignKey("templates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    key: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    schema_json: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)
    subcomponents: Mapped[list[dict[str, Any]] | None] = mapped_column(JSONB, nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index(
            "ix_component_schemas_subcomponents",
            "subcomponents",
            postgresql_using="gin",
        ),
    )
