"""
app/mappers/item_resolver.py

Tiered fuzzy resolution of free-text item names against the item catalog.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from app.domain.catalog import ItemCatalog

logger = logging.getLogger(__name__)

TRAILING_DESCRIPTORS: tuple[str, ...] = (
    "blocks",
    "block",
    "buckets",
    "bucket",
    "slabs",
    "slab",
    "trapdoors",
    "trapdoor",
    "chests",
    "chest",
    "hoppers",
    "hopper",
    "signs",
    "sign",
    "torches",
    "torch",
    "repeaters",
    "repeater",
    "pistons",
    "piston",
    "levers",
    "lever",
)

MATCH_EXACT = "exact"
MATCH_SUFFIX = "suffix"
MATCH_SUBSTRING = "substring"


@dataclass(frozen=True)
class ItemResolution:
    """
    Resolved catalog item and the tier that produced it.
    """

    name: str
    strategy: str


def _build_descriptor_pattern(descriptors: Sequence[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(descriptor) for descriptor in descriptors)
    return re.compile(rf"\s+(?:{alternatives})$", re.IGNORECASE)


class ItemResolver:
    """
    Maps raw item names to canonical catalog entries.

    Tiers, first hit wins: exact match, then exact or containment match on
    the name with one trailing descriptor removed (the name itself when it
    has none), then containment against the full name.
    """

    def __init__(
        self,
        catalog: ItemCatalog,
        *,
        descriptors: Sequence[str] = TRAILING_DESCRIPTORS,
    ) -> None:
        self._catalog = catalog
        self._lowered: tuple[tuple[str, str], ...] = tuple(
            (item.lower(), item) for item in catalog
        )
        self._descriptor_pattern = _build_descriptor_pattern(descriptors)

    @property
    def catalog(self) -> ItemCatalog:
        return self._catalog

    def resolve(self, raw_name: str) -> str | None:
        """
        Return the canonical catalog name for ``raw_name`` or None.
        """

        resolution = self.resolve_with_strategy(raw_name)
        return resolution.name if resolution is not None else None

    def resolve_with_strategy(self, raw_name: str) -> ItemResolution | None:
        normalized = raw_name.strip().lower()
        if not normalized:
            return None

        exact = self._catalog.lookup(normalized)
        if exact is not None:
            return ItemResolution(name=exact, strategy=MATCH_EXACT)

        stripped = self._strip_descriptor(normalized)
        if stripped:
            stripped_exact = self._catalog.lookup(stripped)
            if stripped_exact is not None:
                return self._log_match(raw_name, stripped_exact, MATCH_SUFFIX)
            contained = self._find_containment(stripped)
            if contained is not None:
                return self._log_match(raw_name, contained, MATCH_SUFFIX)

        contained = self._find_containment(normalized)
        if contained is not None:
            return self._log_match(raw_name, contained, MATCH_SUBSTRING)

        logger.debug("Item name unresolved raw_name=%r", raw_name)
        return None

    def _strip_descriptor(self, normalized: str) -> str:
        return self._descriptor_pattern.sub("", normalized, count=1).strip()

    def _find_containment(self, needle: str) -> str | None:
        for lowered, item in self._lowered:
            if needle in lowered or lowered in needle:
                return item
        return None

    @staticmethod
    def _log_match(raw_name: str, item: str, strategy: str) -> ItemResolution:
        logger.debug(
            "Item name resolved raw_name=%r item=%r strategy=%s",
            raw_name,
            item,
            strategy,
        )
        return ItemResolution(name=item, strategy=strategy)
