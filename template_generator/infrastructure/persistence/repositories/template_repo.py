"""Template repository. Returns application DTOs; implements ITemplateRepository."""

from __future__ import annotations

import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from template_generator.application.dtos.template import TemplateResult
from template_generator.domain.exceptions import TemplateAlreadyExistsException
from template_generator.infrastructure.persistence.models.template import Template
from template_generator.infrastructure.persistence.repositories.base import (
    BaseRepository,
    translate_db_errors,
)

logger = logging.getLogger(__name__)

ACTIVE_NAME_INDEX = "uq_templates_name_active"


def _template_to_result(t: Template) -> TemplateResult:
    """Map ORM Template to application TemplateResult."""
    return TemplateResult(
        id=t.id,
        name=t.name,
        description=t.description,
        created_by=t.created_by,
        is_deleted=t.is_deleted,
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


class TemplateRepository(BaseRepository[Template]):
    """Template repository (soft delete only)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Template)

    @translate_db_errors("Failed to fetch templates")
    async def list_active(self) -> list[TemplateResult]:
        result = await self.db.execute(
            select(Template)
            .where(Template.is_deleted.is_(False))
            .order_by(Template.created_at.desc())
        )
        return [_template_to_result(t) for t in result.scalars().all()]

    async def _get_active_entity(self, template_id: str) -> Template | None:
        result = await self.db.execute(
            select(Template).where(
                Template.id == template_id,
                Template.is_deleted.is_(False),
            )
        )
        return result.scalar_one_or_none()

    @translate_db_errors("Failed to fetch template")
    async def get_active_by_id(self, template_id: str) -> TemplateResult | None:
        row = await self._get_active_entity(template_id)
        return _template_to_result(row) if row else None

    @translate_db_errors("Failed to create template")
    async def exists_active_by_name(self, name: str) -> bool:
        result = await self.db.execute(
            select(
                exists().where(
                    Template.name == name,
                    Template.is_deleted.is_(False),
                )
            )
        )
        return bool(result.scalar())

    @translate_db_errors("Failed to create template")
    async def create_template(
        self, name: str, description: str | None, created_by: str
    ) -> TemplateResult:
        """Insert a template.

        The partial unique index closes the gap between the caller's name
        check and this insert; losing that race raises
        TemplateAlreadyExistsException.
        """
        try:
            async with self.db.begin_nested():
                created = await self.create(
                    Template(name=name, description=description, created_by=created_by)
                )
        except IntegrityError as e:
            if ACTIVE_NAME_INDEX in str(e.orig):
                raise TemplateAlreadyExistsException(name) from e
            raise
        return _template_to_result(created)

    @translate_db_errors("Failed to delete template")
    async def soft_delete(self, template_id: str) -> TemplateResult | None:
        template = await self._get_active_entity(template_id)
        if template is None:
            return None
        template.is_deleted = True
        updated = await self.update(template)
        return _template_to_result(updated)
