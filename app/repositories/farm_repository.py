"""
app/repositories/farm_repository.py

Storage contract and SQLAlchemy persistence for imported farms.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.farm_import import ImportRecord
from db.models.farm import Farm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertResult:
    """
    Outcome of one insert. ``message`` carries the storage error verbatim.
    """

    ok: bool
    message: str | None = None


class FarmStorage(ABC):
    """
    Storage abstraction used by the bulk importer.
    """

    @abstractmethod
    def find_by_slug(self, slug: str) -> object | None:
        """
        Return the stored farm with this slug, or None.
        """

    @abstractmethod
    def insert(self, record: ImportRecord) -> InsertResult:
        """
        Persist one record.
        """


def to_farm_model(record: ImportRecord, *, author_id: uuid.UUID | None = None) -> Farm:
    """
    Convert a validated record into a Farm model object.
    """

    return Farm(
        slug=record.slug,
        title=record.title,
        description=record.description,
        category=record.category,
        platform=list(record.platforms),
        versions=list(record.versions),
        video_url=record.video_url,
        materials=[
            {"name": material.name, "count": material.count} for material in record.materials
        ],
        optional_materials=[
            {"name": material.name, "count": material.count}
            for material in record.optional_materials
        ],
        tags=list(record.tags),
        farmable_items=list(record.farmable_items),
        estimated_time=record.estimated_time_minutes,
        drop_rate_per_hour=(
            [{"item": rate.item, "rate": rate.rate} for rate in record.drop_rate_per_hour]
            or None
        ),
        required_biome=record.required_biome,
        farm_designer=record.farm_designer,
        chunk_requirements=record.chunk_requirements,
        height_requirements=record.height_requirements,
        notes=record.notes,
        schematic_url=record.schematic_url,
        author_id=author_id,
        public=True,
        upvotes_count=0,
    )


class FarmRepository(FarmStorage):
    """
    Farm persistence through a SQLAlchemy session.

    Each insert commits on its own so one failing row never rolls back rows
    that were already imported.
    """

    def __init__(self, session: Session, *, author_id: uuid.UUID | None = None) -> None:
        self._session = session
        self._author_id = author_id

    def find_by_slug(self, slug: str) -> Farm | None:
        stmt = select(Farm).where(Farm.slug == slug)
        try:
            return self._session.execute(stmt).scalars().first()
        except SQLAlchemyError:
            # Leave the session usable for the next row.
            self._session.rollback()
            raise

    def insert(self, record: ImportRecord) -> InsertResult:
        farm = to_farm_model(record, author_id=self._author_id)
        try:
            self._session.add(farm)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            message = str(getattr(exc, "orig", None) or exc)
            logger.warning("Farm insert failed slug=%r: %s", record.slug, message)
            return InsertResult(ok=False, message=message)
        return InsertResult(ok=True)
