"""
tests/test_item_resolver.py

Tiered resolution of raw item names.
"""

from __future__ import annotations

import unittest

from app.domain.catalog import ItemCatalog, get_item_catalog
from app.mappers.item_resolver import (
    MATCH_EXACT,
    MATCH_SUBSTRING,
    MATCH_SUFFIX,
    ItemResolver,
)

from conftest import FIXTURE_ITEMS


class ItemResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = ItemResolver(ItemCatalog(FIXTURE_ITEMS))

    def test_every_catalog_item_resolves_to_itself(self) -> None:
        for item in FIXTURE_ITEMS:
            resolution = self.resolver.resolve_with_strategy(item)
            self.assertIsNotNone(resolution, item)
            self.assertEqual(resolution.name, item)
            self.assertEqual(resolution.strategy, MATCH_EXACT)

    def test_exact_match_ignores_case_and_padding(self) -> None:
        self.assertEqual(self.resolver.resolve("  cobbled DEEPSLATE "), "Cobbled Deepslate")

    def test_plural_resolves_to_singular(self) -> None:
        self.assertEqual(self.resolver.resolve("Chests"), "Chest")
        self.assertEqual(self.resolver.resolve("hoppers"), "Hopper")

    def test_plural_without_descriptor_uses_stripped_tier(self) -> None:
        resolution = self.resolver.resolve_with_strategy("Chests")

        self.assertIsNotNone(resolution)
        self.assertEqual(resolution.name, "Chest")
        self.assertEqual(resolution.strategy, MATCH_SUFFIX)

    def test_trailing_descriptor_is_stripped(self) -> None:
        resolution = self.resolver.resolve_with_strategy("Cobbled Deepslate blocks")

        self.assertIsNotNone(resolution)
        self.assertEqual(resolution.name, "Cobbled Deepslate")
        self.assertEqual(resolution.strategy, MATCH_SUFFIX)

    def test_descriptor_stripped_name_falls_back_to_containment(self) -> None:
        resolution = self.resolver.resolve_with_strategy("water buckets")

        self.assertIsNotNone(resolution)
        self.assertEqual(resolution.name, "Water Bucket")
        self.assertEqual(resolution.strategy, MATCH_SUFFIX)

    def test_partial_name_matches_by_containment(self) -> None:
        resolution = self.resolver.resolve_with_strategy("deepslate")

        self.assertIsNotNone(resolution)
        self.assertEqual(resolution.name, "Cobbled Deepslate")
        self.assertEqual(resolution.strategy, MATCH_SUFFIX)

    def test_item_spanning_the_descriptor_uses_substring_tier(self) -> None:
        resolution = self.resolver.resolve_with_strategy("big oak slab")

        self.assertIsNotNone(resolution)
        self.assertEqual(resolution.name, "Oak Slab")
        self.assertEqual(resolution.strategy, MATCH_SUBSTRING)

    def test_containment_returns_first_catalog_entry(self) -> None:
        self.assertEqual(self.resolver.resolve("torc"), "Torch")

    def test_unknown_and_blank_names_are_unresolved(self) -> None:
        self.assertIsNone(self.resolver.resolve("banana"))
        self.assertIsNone(self.resolver.resolve(""))
        self.assertIsNone(self.resolver.resolve("   "))

    def test_custom_descriptors(self) -> None:
        resolver = ItemResolver(ItemCatalog(FIXTURE_ITEMS), descriptors=("stack",))

        resolution = resolver.resolve_with_strategy("Obsidian stack")
        self.assertEqual(resolution.name, "Obsidian")
        self.assertEqual(resolution.strategy, MATCH_SUFFIX)


class ProductionCatalogResolverTests(unittest.TestCase):
    def test_bundled_catalog_round_trips(self) -> None:
        catalog = get_item_catalog()
        resolver = ItemResolver(catalog)

        self.assertGreater(len(catalog), 200)
        for item in catalog:
            self.assertEqual(resolver.resolve(item), item)
            self.assertEqual(resolver.resolve(item.upper()), item)
