"""Add partial unique index on active template names

Revision ID: d5a7e9b1c3f2
Revises: 8c4e2b6f0d31
Create Date: 2026-10-05 09:41:27.003615

Two concurrent creates with the same name can both pass the existence
check; this index makes the second insert fail. Soft-deleted templates do
not reserve their name.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "d5a7e9b1c3f2"
down_revision: str | Sequence[str] | None = "8c4e2b6f0d31"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create uq_templates_name_active."""
    op.create_index(
        "uq_templates_name_active",
        "templates",
        ["name"],
        unique=True,
        postgresql_where=sa.text("NOT is_deleted"),
    )


def downgrade() -> None:
    """Drop uq_templates_name_active."""
    op.drop_index("uq_templates_name_active", table_name="templates")
