"""
app/domain package marker.
"""

from app.domain.catalog import ItemCatalog, get_item_catalog
from app.domain.farm_import import (
    DropRate,
    ImportOutcome,
    ImportRecord,
    ImportState,
    MaterialEntry,
    MaterialParseResult,
    PreviewSummary,
    RawEntry,
    ResolvedMaterial,
    RowFailure,
    ValidationResult,
    slugify,
)

__all__ = [
    "DropRate",
    "ImportOutcome",
    "ImportRecord",
    "ImportState",
    "ItemCatalog",
    "MaterialEntry",
    "MaterialParseResult",
    "PreviewSummary",
    "RawEntry",
    "ResolvedMaterial",
    "RowFailure",
    "ValidationResult",
    "get_item_catalog",
    "slugify",
]
