"""
app/services/template_service.py

Downloadable CSV template showing every supported import column.
"""

from __future__ import annotations

import csv
import io

TEMPLATE_COLUMNS: tuple[str, ...] = (
    "title",
    "description",
    "category",
    "platform",
    "versions",
    "video_url",
    "materials",
    "optional_materials",
    "tags",
    "farmable_items",
    "estimated_time",
    "required_biome",
    "farm_designer",
    "drop_rate_per_hour",
    "chunk_requirements",
    "height_requirements",
    "notes",
    "schematic_url",
)

TEMPLATE_FILENAME = "farm_import_template.csv"

TEMPLATE_EXAMPLES: tuple[dict[str, str], ...] = (
    {
        "title": "Iron Golem Farm",
        "description": "Efficient iron golem farm for Java edition",
        "category": "Iron Farm",
        "platform": "Java",
        "versions": "1.21; 1.20.6",
        "video_url": "https://youtube.com/watch?v=example1",
        "materials": "93 Cobbled Deepslate; 59 Scaffolding; 2 Obsidian; 3 Villager",
        "optional_materials": "1 Name Tag",
        "tags": "iron-farm; mob-farm; efficient",
        "farmable_items": "Iron Ingot",
        "estimated_time": "120",
        "required_biome": "Plains",
        "farm_designer": "DesignerName",
        "drop_rate_per_hour": "Iron Ingot: 3600/hour",
        "notes": "Requires 3 villagers",
    },
    {
        "title": "Gold Farm",
        "description": "Nether gold farm using piglins",
        "category": "Gold Farm",
        "platform": "Java; Bedrock",
        "versions": "1.21",
        "video_url": "https://youtube.com/watch?v=example2",
        "materials": "64 Obsidian; 32 Glass; 16 Hopper",
        "tags": "gold-farm; nether",
        "farmable_items": "Gold Ingot; Gold Nugget",
        "estimated_time": "90",
        "required_biome": "Nether Wastes",
        "farm_designer": "AnotherDesigner",
        "drop_rate_per_hour": "Gold Ingot: 1800/hour; Gold Nugget: 5400/hour",
    },
)


def build_template_csv() -> str:
    """
    Render the example rows as CSV text with a header row.
    """

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=TEMPLATE_COLUMNS, restval="", lineterminator="\n")
    writer.writeheader()
    for example in TEMPLATE_EXAMPLES:
        writer.writerow(example)
    return buffer.getvalue()
