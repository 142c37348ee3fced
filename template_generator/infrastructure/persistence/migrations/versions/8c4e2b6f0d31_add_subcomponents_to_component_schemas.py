"""Add subcomponents JSONB column to component_schemas

Revision ID: 8c4e2b6f0d31
Revises: 3f1a9c2d7b10
Create Date: 2026-09-28 16:02:11.540917

Grouped sheets (e.g. "Invoice 1", "Invoice 2") are stored as one component
whose subcomponents column holds the per-sheet key/title/schema_json list.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "8c4e2b6f0d31"
down_revision: str | Sequence[str] | None = "3f1a9c2d7b10"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Add nullable subcomponents column and GIN index."""
    op.add_column(
        "component_schemas",
        sa.Column(
            "subcomponents", postgresql.JSONB(astext_type=sa.Text()), nullable=True
        ),
    )
    op.execute(
        """
        CREATE INDEX IF NOT EXISTS ix_component_schemas_subcomponents
        ON component_schemas USING GIN (subcomponents)
        """
    )


def downgrade() -> None:
    """Drop GIN index and subcomponents column."""
    op.execute("DROP INDEX IF EXISTS ix_component_schemas_subcomponents")
    op.drop_column("component_schemas", "subcomponents")
