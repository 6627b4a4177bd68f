"""
app/domain/farm_import.py

Domain models used by the material parser and the bulk farm import flow.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

_SLUG_SEPARATOR_PATTERN = re.compile(r"[^a-z0-9]+")

DUPLICATE_TITLE_MESSAGE = "A record with this title already exists"
UNTITLED = "Untitled"


def slugify(title: str) -> str:
    """
    Derive the URL-safe slug used as the uniqueness key for farms.
    """

    return _SLUG_SEPARATOR_PATTERN.sub("-", title.lower()).strip("-")


@dataclass(frozen=True)
class RawEntry:
    """
    One quantity/name pair extracted from a text chunk, before resolution.
    """

    quantity: int
    raw_name: str


@dataclass(frozen=True)
class ResolvedMaterial:
    """
    Catalog item with a positive count.
    """

    name: str
    count: int


@dataclass(frozen=True)
class MaterialParseResult:
    """
    Net materials plus the text chunks that could not be matched.
    """

    added: tuple[ResolvedMaterial, ...] = ()
    failed: tuple[str, ...] = ()


@dataclass(frozen=True)
class MaterialEntry:
    """
    A material as carried by an imported record. Not yet validated.
    """

    name: str | None
    count: int | None


@dataclass(frozen=True)
class DropRate:
    item: str
    rate: str


@dataclass(frozen=True)
class ImportRecord:
    """
    Canonical shape of one farm design, independent of CSV or JSON origin.
    """

    title: str | None
    description: str | None
    category: str | None
    platforms: tuple[str, ...] = ()
    versions: tuple[str, ...] = ()
    video_url: str | None = None
    materials: tuple[MaterialEntry, ...] = ()
    optional_materials: tuple[MaterialEntry, ...] = ()
    tags: tuple[str, ...] = ()
    farmable_items: tuple[str, ...] = ()
    estimated_time_minutes: int | None = None
    drop_rate_per_hour: tuple[DropRate, ...] = ()
    notes: str | None = None
    chunk_requirements: str | None = None
    height_requirements: str | None = None
    farm_designer: str | None = None
    required_biome: str | None = None
    schematic_url: str | None = None
    material_parse_failures: tuple[str, ...] = ()

    @property
    def slug(self) -> str:
        return slugify(self.title or "")

    @property
    def display_title(self) -> str:
        return (self.title or "").strip() or UNTITLED


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one record. Warnings never block import.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class RowFailure:
    """
    One row that was not persisted, with the reasons why.
    """

    row_index: int
    title: str
    errors: tuple[str, ...]

    @property
    def row_number(self) -> int:
        # 1-based file line, accounting for the header row.
        return self.row_index + 2


@dataclass(frozen=True)
class ImportOutcome:
    """
    End-of-run bulk import summary.
    """

    success_count: int
    failure_count: int
    skipped_count: int = 0
    per_row_failures: tuple[RowFailure, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PreviewSummary:
    """
    Counts shown to the reviewer before the import is triggered.
    """

    valid_count: int
    error_count: int
    warning_count: int


class ImportState(str, Enum):
    IDLE = "idle"
    PARSED = "parsed"
    VALIDATED = "validated"
    IMPORTING = "importing"
    COMPLETED = "completed"
