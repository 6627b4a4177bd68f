"""
app/services/duplicate_detector.py

Slug-based duplicate detection against persisted farms.
"""

from __future__ import annotations

from app.domain.farm_import import ImportRecord, slugify
from app.repositories.farm_repository import FarmStorage


class DuplicateDetector:
    """
    Checks whether a record's slug is already taken in storage.
    """

    def __init__(self, storage: FarmStorage) -> None:
        self._storage = storage

    def is_duplicate(self, record: ImportRecord) -> bool:
        return self.slug_exists(record.slug)

    def slug_exists(self, slug: str) -> bool:
        return self._storage.find_by_slug(slug) is not None


__all__ = ["DuplicateDetector", "slugify"]
