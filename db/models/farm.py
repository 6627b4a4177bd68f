"""
db/models/farm.py

Persisted farm designs created through bulk import.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import JSON, Boolean, Index, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JSONVariant = JSON().with_variant(JSONB(), "postgresql")


class Farm(Base, TimestampMixin):
    __tablename__ = "farms"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    slug: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Lowercased, dash-separated title; uniqueness key",
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str | None] = mapped_column(String(120), nullable=True)
    platform: Mapped[list[str]] = mapped_column(
        JSONVariant,
        nullable=False,
        comment="Java and/or Bedrock",
    )
    versions: Mapped[list[str]] = mapped_column(JSONVariant, nullable=False, default=list)
    video_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    materials: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONVariant,
        nullable=False,
        default=list,
        comment="List of {name, count}",
    )
    optional_materials: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONVariant,
        nullable=False,
        default=list,
    )
    tags: Mapped[list[str]] = mapped_column(JSONVariant, nullable=False, default=list)
    farmable_items: Mapped[list[str]] = mapped_column(JSONVariant, nullable=False, default=list)
    estimated_time: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Build time in minutes",
    )
    drop_rate_per_hour: Mapped[list[dict[str, Any]] | None] = mapped_column(
        JSONVariant,
        nullable=True,
        comment="List of {item, rate}",
    )
    required_biome: Mapped[str | None] = mapped_column(Text, nullable=True)
    farm_designer: Mapped[str | None] = mapped_column(Text, nullable=True)
    chunk_requirements: Mapped[str | None] = mapped_column(Text, nullable=True)
    height_requirements: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    schematic_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    upvotes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("slug", name="uq_farms_slug"),
        Index("ix_farms_category", "category"),
        Index("ix_farms_author_id", "author_id"),
    )
