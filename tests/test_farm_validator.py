"""
tests/test_farm_validator.py

Record validation: blocking errors vs advisory warnings.
"""

from __future__ import annotations

import dataclasses
import unittest

from app.domain.catalog import ItemCatalog
from app.domain.farm_import import ImportRecord, MaterialEntry
from app.validators.farm_validator import (
    FarmRecordValidator,
    VersionsRequirement,
    validate_record,
)

from conftest import FIXTURE_CATEGORIES, FIXTURE_ITEMS


def _record(**overrides: object) -> ImportRecord:
    base = ImportRecord(
        title="Iron Golem Farm",
        description="Efficient iron farm",
        category="Iron Farm",
        platforms=("Java",),
        versions=("1.21",),
        materials=(MaterialEntry(name="Obsidian", count=2),),
    )
    return dataclasses.replace(base, **overrides)


class FarmRecordValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = FarmRecordValidator(
            catalog=ItemCatalog(FIXTURE_ITEMS),
            categories=FIXTURE_CATEGORIES,
        )

    def test_complete_record_is_valid(self) -> None:
        result = self.validator.validate(_record())

        self.assertTrue(result.valid)
        self.assertEqual(result.errors, ())
        self.assertEqual(result.warnings, ())

    def test_empty_title_is_an_error(self) -> None:
        for title in (None, "", "   "):
            result = self.validator.validate(_record(title=title))
            self.assertFalse(result.valid)
            self.assertIn("Title is required", result.errors)

    def test_length_limits(self) -> None:
        result = self.validator.validate(_record(title="x" * 201, description="y" * 5001))

        self.assertIn("Title must be at most 200 characters", result.errors)
        self.assertIn("Description must be at most 5000 characters", result.errors)

    def test_missing_description_and_category(self) -> None:
        result = self.validator.validate(_record(description=None, category=""))

        self.assertIn("Description is required", result.errors)
        self.assertIn("Category is required", result.errors)

    def test_unknown_category(self) -> None:
        result = self.validator.validate(_record(category="Cake Farm"))

        self.assertEqual(
            result.errors,
            ("Invalid category: Cake Farm. Must be one of the available categories.",),
        )

    def test_platforms(self) -> None:
        missing = self.validator.validate(_record(platforms=()))
        invalid = self.validator.validate(_record(platforms=("Java", "PS5", "Xbox")))

        self.assertIn("At least one platform is required (Java or Bedrock)", missing.errors)
        self.assertEqual(invalid.errors, ("Invalid platforms: PS5, Xbox. Must be Java or Bedrock",))

    def test_versions_required_by_default(self) -> None:
        result = self.validator.validate(_record(platforms=("Bedrock",), versions=()))
        self.assertEqual(result.errors, ("At least one version is required",))

    def test_java_only_versions_rule(self) -> None:
        validator = FarmRecordValidator(
            catalog=ItemCatalog(FIXTURE_ITEMS),
            categories=FIXTURE_CATEGORIES,
            versions_rule=VersionsRequirement.JAVA_ONLY,
        )

        bedrock = validator.validate(_record(platforms=("Bedrock",), versions=()))
        java = validator.validate(_record(platforms=("Java", "Bedrock"), versions=()))

        self.assertTrue(bedrock.valid)
        self.assertEqual(java.errors, ("At least one version is required",))

    def test_material_errors_and_warnings(self) -> None:
        result = self.validator.validate(
            _record(
                materials=(
                    MaterialEntry(name=None, count=3),
                    MaterialEntry(name="Hopper", count=0),
                    MaterialEntry(name="Moon Rock", count=1),
                ),
                optional_materials=(MaterialEntry(name="Glass", count=None),),
            )
        )

        self.assertEqual(
            result.errors,
            (
                "Material 1: name is required",
                "Material 2: count must be at least 1",
                "Optional material 1: count must be at least 1",
            ),
        )
        self.assertEqual(
            result.warnings,
            ('Material 3: "Moon Rock" may not be a valid Minecraft item',),
        )

    def test_warnings_do_not_block(self) -> None:
        result = self.validator.validate(
            _record(
                farmable_items=("Iron Ingot", "Poppy"),
                video_url="https://vimeo.com/123",
                material_parse_failures=("lots of dirt",),
            )
        )

        self.assertTrue(result.valid)
        self.assertEqual(
            result.warnings,
            (
                'Farmable item "Poppy" may not be a valid Minecraft item',
                "Video URL does not appear to be a YouTube URL",
                "Could not match material text: lots of dirt",
            ),
        )

    def test_youtube_urls_pass(self) -> None:
        for url in ("https://www.youtube.com/watch?v=abc", "https://youtu.be/abc"):
            self.assertEqual(self.validator.validate(_record(video_url=url)).warnings, ())

    def test_negative_estimated_time(self) -> None:
        result = self.validator.validate(_record(estimated_time_minutes=-1))
        self.assertEqual(result.errors, ("Estimated time must be a non-negative number of minutes",))

    def test_catalog_membership_is_case_insensitive(self) -> None:
        result = self.validator.validate(_record(materials=(MaterialEntry(name="obsidian", count=1),)))
        self.assertEqual(result.warnings, ())


class ValidateRecordDefaultsTests(unittest.TestCase):
    def test_production_categories_and_catalog(self) -> None:
        result = validate_record(
            _record(category="Gold Farm", materials=(MaterialEntry(name="Name Tag", count=1),))
        )
        self.assertTrue(result.valid)
        self.assertEqual(result.warnings, ())
