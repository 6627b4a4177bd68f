"""create farms table

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 09:30:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "farms",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=120), nullable=True),
        sa.Column("platform", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("versions", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=True),
        sa.Column("materials", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("optional_materials", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("tags", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("farmable_items", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("estimated_time", sa.Integer(), nullable=True),
        sa.Column("drop_rate_per_hour", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("required_biome", sa.Text(), nullable=True),
        sa.Column("farm_designer", sa.Text(), nullable=True),
        sa.Column("chunk_requirements", sa.Text(), nullable=True),
        sa.Column("height_requirements", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("schematic_url", sa.Text(), nullable=True),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column("public", sa.Boolean(), nullable=False),
        sa.Column("upvotes_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_farms"),
        sa.UniqueConstraint("slug", name="uq_farms_slug"),
    )
    op.create_index("ix_farms_category", "farms", ["category"], unique=False)
    op.create_index("ix_farms_author_id", "farms", ["author_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_farms_author_id", table_name="farms")
    op.drop_index("ix_farms_category", table_name="farms")
    op.drop_table("farms")
