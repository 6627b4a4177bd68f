"""
tests/test_record_normalizer.py

Raw CSV/JSON rows -> ImportRecord coercion.
"""

from __future__ import annotations

import pytest

from app.domain.farm_import import DropRate, MaterialEntry, slugify
from app.mappers.record_normalizer import RecordNormalizer, normalize_key


class TestNormalizeKey:
    @pytest.mark.parametrize("key", ["video_url", "videoUrl", " Video URL ", "VIDEO-URL"])
    def test_snake_and_camel_case_compare_equal(self, key: str) -> None:
        assert normalize_key(key) == "videourl"


class TestSlugify:
    def test_collapses_non_alphanumeric_runs(self) -> None:
        assert slugify("Iron Golem Farm!! (1.21)") == "iron-golem-farm-1-21"

    def test_blank_title_gives_empty_slug(self) -> None:
        assert slugify("  ") == ""


class TestRecordNormalizer:
    def test_csv_style_row(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize(
            {
                "title": " Iron Golem Farm ",
                "description": "Efficient iron farm",
                "category": "Iron Farm",
                "platform": "Java; Bedrock",
                "versions": "1.21, 1.20.6",
                "materials": "93 Cobbled Deepslate; 2 Obsidian",
                "tags": "iron|afk",
                "farmable_items": "Iron Ingot",
                "estimated_time": "120 minutes",
                "notes": "",
            }
        )

        assert record.title == "Iron Golem Farm"
        assert record.slug == "iron-golem-farm"
        assert record.platforms == ("Java", "Bedrock")
        assert record.versions == ("1.21", "1.20.6")
        assert record.materials == (
            MaterialEntry(name="Cobbled Deepslate", count=93),
            MaterialEntry(name="Obsidian", count=2),
        )
        assert record.tags == ("iron", "afk")
        assert record.farmable_items == ("Iron Ingot",)
        assert record.estimated_time_minutes == 120
        assert record.notes is None
        assert record.video_url is None
        assert record.material_parse_failures == ()

    def test_json_style_row_with_camel_case_keys(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize(
            {
                "title": "Gold Farm",
                "platforms": ["Java", " ", None],
                "version": "1.21",
                "videoUrl": "https://youtu.be/abc",
                "materials": [{"name": "Obsidian", "count": 64}, {"name": "", "count": "0"}],
                "optionalMaterials": {"name": "Glass", "count": 3},
                "estimatedTimeMinutes": 90,
                "dropRatePerHour": [{"item": "Gold Ingot", "rate": "1800/hour"}, {"rate": "1"}],
            }
        )

        assert record.platforms == ("Java",)
        assert record.versions == ("1.21",)
        assert record.video_url == "https://youtu.be/abc"
        assert record.materials == (
            MaterialEntry(name="Obsidian", count=64),
            MaterialEntry(name=None, count=0),
        )
        assert record.optional_materials == (MaterialEntry(name="Glass", count=3),)
        assert record.estimated_time_minutes == 90
        assert record.drop_rate_per_hour == (DropRate(item="Gold Ingot", rate="1800/hour"),)

    def test_first_alias_wins(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize({"platform": "Java", "platforms": "Bedrock"})
        assert record.platforms == ("Java",)

    def test_unknown_columns_are_ignored(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize({"title": "A", "upvotes": "12", None: ["extra"]})
        assert record.title == "A"

    def test_materials_json_text_is_decoded(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize({"materials": '[{"name": "Hopper", "count": 5}]'})
        assert record.materials == (MaterialEntry(name="Hopper", count=5),)

    def test_unmatched_material_text_is_collected(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize(
            {
                "materials": "4 Torch; lots of dirt",
                "optional_materials": "2 Banana",
            }
        )

        assert record.materials == (MaterialEntry(name="Torch", count=4),)
        assert record.optional_materials == ()
        assert record.material_parse_failures == ("lots of dirt", "2 Banana")

    def test_repeated_material_text_is_merged(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize({"materials": "5 Torch\n3 torches"})
        assert record.materials == (MaterialEntry(name="Torch", count=8),)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("45", 45),
            (" 30min", 30),
            ("-5", -5),
            ("soon", None),
            ("", None),
            (True, None),
            (12.7, 12),
            (float("inf"), None),
            (float("nan"), None),
        ],
    )
    def test_estimated_time_coercion(
        self,
        normalizer: RecordNormalizer,
        value: object,
        expected: int | None,
    ) -> None:
        assert normalizer.normalize({"estimated_time": value}).estimated_time_minutes == expected

    def test_non_finite_material_counts_become_missing(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize(
            {
                "materials": [
                    {"name": "Torch", "count": float("inf")},
                    {"name": "Chest", "count": float("nan")},
                ]
            }
        )

        assert record.materials == (
            MaterialEntry(name="Torch", count=None),
            MaterialEntry(name="Chest", count=None),
        )

    def test_drop_rate_text_forms(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize(
            {"drop_rate_per_hour": "Iron Ingot: 3600/hour; Gunpowder 900/h"}
        )

        assert record.drop_rate_per_hour == (
            DropRate(item="Iron Ingot", rate="3600/hour"),
            DropRate(item="Gunpowder", rate="900/h"),
        )

    def test_single_word_drop_rate_keeps_empty_rate(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize({"drop_rate_per_hour": "Emeralds"})
        assert record.drop_rate_per_hour == (DropRate(item="Emeralds", rate=""),)

    def test_malformed_drop_rate_json_is_dropped(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize({"drop_rate_per_hour": "[{broken"})
        assert record.drop_rate_per_hour == ()

    def test_missing_title_displays_as_untitled(self, normalizer: RecordNormalizer) -> None:
        record = normalizer.normalize({"description": "no title"})

        assert record.title is None
        assert record.display_title == "Untitled"
        assert record.slug == ""
