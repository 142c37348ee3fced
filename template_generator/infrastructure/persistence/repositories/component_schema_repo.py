"""Component schema repository. Implements IComponentSchemaRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from template_generator.application.dtos.template import (
    ComponentDefinition,
    ComponentResult,
)
from template_generator.infrastructure.persistence.models.component_schema import (
    ComponentSchema,
)
from template_generator.infrastructure.persistence.repositories.base import (
    BaseRepository,
    translate_db_errors,
)


def _component_to_result(c: ComponentSchema) -> ComponentResult:
    """Map ORM ComponentSchema to application ComponentResult."""
    return ComponentResult(
        id=c.id,
        template_id=c.template_id,
        key=c.key,
        title=c.title,
        schema_json=c.schema_json,
        subcomponents=c.subcomponents,
        order_index=c.order_index,
        is_deleted=c.is_deleted,
        created_at=c.created_at,
        updated_at=c.updated_at,
    )


class ComponentSchemaRepository(BaseRepository[ComponentSchema]):
    """Component schema repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ComponentSchema)

    @translate_db_errors("Failed to create template")
    async def create_many(
        self, template_id: str, components: list[ComponentDefinition]
    ) -> list[ComponentResult]:
        """Insert all components in one flush; order_index is the list position."""
        rows = [
            ComponentSchema(
                template_id=template_id,
                key=component.key,
                title=component.title,
                schema_json=component.schema_json,
                subcomponents=component.subcomponents_as_dicts(),
                order_index=index,
            )
            for index, component in enumerate(components)
        ]
        created = await self.create_all(rows)
        return [_component_to_result(c) for c in created]

    @translate_db_errors("Failed to fetch template")
    async def list_active_for_template(self, template_id: str) -> list[ComponentResult]:
        result = await self.db.execute(
            select(ComponentSchema)
            .where(
                ComponentSchema.template_id == template_id,
                ComponentSchema.is_deleted.is_(False),
            )
            .order_by(ComponentSchema.order_index)
        )
        return [_component_to_result(c) for c in result.scalars().all()]

    @translate_db_errors("Failed to delete template")
    async def soft_delete_for_template(self, template_id: str) -> int:
        result = await self.db.execute(
            update(ComponentSchema)
            .where(
                ComponentSchema.template_id == template_id,
                ComponentSchema.is_deleted.is_(False),
            )
            .values(is_deleted=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0
