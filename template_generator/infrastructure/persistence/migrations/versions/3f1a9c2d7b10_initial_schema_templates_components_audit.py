"""initial_schema_templates_components_audit

Revision ID: 3f1a9c2d7b10
Revises:
Create Date: 2026-09-21 10:14:52.118302

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1a9c2d7b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "templates",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column(
            "is_deleted", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_templates_is_deleted"), "templates", ["is_deleted"], unique=False
    )

    op.create_table(
        "component_schemas",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("template_id", sa.String(), nullable=False),
        sa.Column("key", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("schema_json", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column(
            "is_deleted", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["template_id"], ["templates.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_component_schemas_template_id"),
        "component_schemas",
        ["template_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_component_schemas_is_deleted"),
        "component_schemas",
        ["is_deleted"],
        unique=False,
    )

    op.create_table(
        "template_audit_logs",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("template_id", sa.String(), nullable=False),
        sa.Column(
            "change_type",
            sa.String(length=50),
            nullable=False,
            comment="CREATE, UPDATE, DELETE",
        ),
        sa.Column("performed_by", sa.String(length=255), nullable=False),
        sa.Column("diff_json", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["template_id"], ["templates.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_template_audit_logs_template_id"),
        "template_audit_logs",
        ["template_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        op.f("ix_template_audit_logs_template_id"), table_name="template_audit_logs"
    )
    op.drop_table("template_audit_logs")
    op.drop_index(
        op.f("ix_component_schemas_is_deleted"), table_name="component_schemas"
    )
    op.drop_index(
        op.f("ix_component_schemas_template_id"), table_name="component_schemas"
    )
    op.drop_table("component_schemas")
    op.drop_index(op.f("ix_templates_is_deleted"), table_name="templates")
    op.drop_table("templates")
