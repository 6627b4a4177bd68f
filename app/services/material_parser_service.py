"""
app/services/material_parser_service.py

Turns pasted material text into catalog-resolved, count-merged materials.

The merge is pure: callers pass the materials they already hold and get a
new tuple back, so incremental "paste more" workflows compose without
shared mutable state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache

from app.domain.catalog import get_item_catalog
from app.domain.farm_import import MaterialParseResult, ResolvedMaterial
from app.mappers.item_resolver import ItemResolver
from app.parsers.material_text import extract_entry, tokenize_entries

logger = logging.getLogger(__name__)


def merge_materials(
    existing: Iterable[ResolvedMaterial],
    additions: Iterable[ResolvedMaterial],
) -> tuple[ResolvedMaterial, ...]:
    """
    Merge ``additions`` into ``existing``, summing counts per item name.

    New names are appended in the order first seen.
    """

    counts: dict[str, int] = {}
    for material in (*existing, *additions):
        counts[material.name] = counts.get(material.name, 0) + material.count
    return tuple(ResolvedMaterial(name=name, count=count) for name, count in counts.items())


class MaterialTextParser:
    """
    Composes tokenizing, extraction, resolution and aggregation.
    """

    def __init__(self, resolver: ItemResolver) -> None:
        self._resolver = resolver

    def parse(
        self,
        text: str | None,
        *,
        existing: Iterable[ResolvedMaterial] = (),
    ) -> MaterialParseResult:
        """
        Parse ``text`` and merge the resolved entries into ``existing``.
        """

        resolved: list[ResolvedMaterial] = []
        failed: list[str] = []

        for candidate in tokenize_entries(text):
            entry = extract_entry(candidate)
            if entry is None:
                failed.append(candidate)
                continue

            item = self._resolver.resolve(entry.raw_name)
            if item is None:
                failed.append(candidate)
                continue

            resolved.append(ResolvedMaterial(name=item, count=entry.quantity))

        if failed:
            logger.info(
                "Material text partially unmatched resolved=%d failed=%d",
                len(resolved),
                len(failed),
            )

        return MaterialParseResult(
            added=merge_materials(existing, resolved),
            failed=tuple(failed),
        )


@lru_cache(maxsize=1)
def get_material_text_parser() -> MaterialTextParser:
    """
    Build and cache the parser bound to the production catalog.
    """

    return MaterialTextParser(ItemResolver(get_item_catalog()))


def parse_materials_from_text(
    text: str | None,
    *,
    existing: Iterable[ResolvedMaterial] = (),
    parser: MaterialTextParser | None = None,
) -> MaterialParseResult:
    """
    Parse free-form material text against the catalog.
    """

    return (parser or get_material_text_parser()).parse(text, existing=existing)
