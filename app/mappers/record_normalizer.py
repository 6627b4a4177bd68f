"""
app/mappers/record_normalizer.py

Normalizes one raw CSV row or JSON object into an ImportRecord.

CSV cells arrive as strings; JSON values may already be lists or numbers.
Everything is coerced here so nothing downstream branches on source format.
"""

from __future__ import annotations

import json
import math
import re
from typing import TYPE_CHECKING, Any, Mapping

from app.domain.farm_import import DropRate, ImportRecord, MaterialEntry

if TYPE_CHECKING:
    from app.services.material_parser_service import MaterialTextParser

_LIST_SPLIT_PATTERN = re.compile(r"[;,|]")
_DROP_RATE_SPLIT_PATTERN = re.compile(r"[;,]")
_DROP_RATE_COLON_PATTERN = re.compile(r"^(.+?)\s*:\s*(.*)$")
_DROP_RATE_SPACE_PATTERN = re.compile(r"^(\S+)\s+(.+)$")
_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")

# Canonical field -> accepted source keys, compared after normalize_key().
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("title",),
    "description": ("description",),
    "category": ("category",),
    "platforms": ("platform", "platforms"),
    "versions": ("versions", "version"),
    "video_url": ("video_url",),
    "materials": ("materials",),
    "optional_materials": ("optional_materials",),
    "tags": ("tags",),
    "farmable_items": ("farmable_items",),
    "estimated_time_minutes": ("estimated_time", "estimated_time_minutes"),
    "drop_rate_per_hour": ("drop_rate_per_hour",),
    "notes": ("notes",),
    "chunk_requirements": ("chunk_requirements",),
    "height_requirements": ("height_requirements",),
    "farm_designer": ("farm_designer",),
    "required_biome": ("required_biome",),
    "schematic_url": ("schematic_url",),
}


def normalize_key(key: str) -> str:
    """
    Normalize a column or JSON key so snake_case and camelCase compare equal.
    """

    return "".join(ch for ch in str(key).strip().lower() if ch.isalnum())


class RecordNormalizer:
    """
    Converts heterogeneous raw rows into the canonical record shape.
    """

    def __init__(self, material_parser: MaterialTextParser) -> None:
        self._material_parser = material_parser
        self._lookup: dict[str, str] = {
            normalize_key(alias): canonical
            for canonical, aliases in FIELD_ALIASES.items()
            for alias in aliases
        }

    def normalize(self, raw_row: Mapping[str, Any]) -> ImportRecord:
        fields = self._canonicalize_keys(raw_row)

        parse_failures: list[str] = []
        materials = self._parse_materials(fields.get("materials"), parse_failures)
        optional_materials = self._parse_materials(
            fields.get("optional_materials"),
            parse_failures,
        )

        return ImportRecord(
            title=self._parse_text(fields.get("title")),
            description=self._parse_text(fields.get("description")),
            category=self._parse_text(fields.get("category")),
            platforms=self._parse_list(fields.get("platforms")),
            versions=self._parse_list(fields.get("versions")),
            video_url=self._parse_text(fields.get("video_url")),
            materials=materials,
            optional_materials=optional_materials,
            tags=self._parse_list(fields.get("tags")),
            farmable_items=self._parse_list(fields.get("farmable_items")),
            estimated_time_minutes=self._parse_int(fields.get("estimated_time_minutes")),
            drop_rate_per_hour=self._parse_drop_rates(fields.get("drop_rate_per_hour")),
            notes=self._parse_text(fields.get("notes")),
            chunk_requirements=self._parse_text(fields.get("chunk_requirements")),
            height_requirements=self._parse_text(fields.get("height_requirements")),
            farm_designer=self._parse_text(fields.get("farm_designer")),
            required_biome=self._parse_text(fields.get("required_biome")),
            schematic_url=self._parse_text(fields.get("schematic_url")),
            material_parse_failures=tuple(parse_failures),
        )

    def _canonicalize_keys(self, raw_row: Mapping[str, Any]) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for key, value in raw_row.items():
            if key is None:
                continue
            canonical = self._lookup.get(normalize_key(key))
            if canonical is None or canonical in fields:
                continue
            fields[canonical] = value
        return fields

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value.strip() == ""
        return False

    def _parse_text(self, value: Any) -> str | None:
        if self._is_blank(value):
            return None
        return str(value).strip()

    def _parse_list(self, value: Any) -> tuple[str, ...]:
        if self._is_blank(value):
            return ()
        if isinstance(value, (list, tuple)):
            items = [str(item) for item in value if item is not None]
        else:
            items = _LIST_SPLIT_PATTERN.split(str(value))
        return tuple(item.strip() for item in items if item.strip())

    def _parse_int(self, value: Any) -> int | None:
        if self._is_blank(value) or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if not math.isfinite(value):
                return None
            return int(value)
        match = _LEADING_INT_PATTERN.match(str(value))
        if match is None:
            return None
        return int(match.group(1))

    def _parse_materials(
        self,
        value: Any,
        parse_failures: list[str],
    ) -> tuple[MaterialEntry, ...]:
        if self._is_blank(value):
            return ()
        if isinstance(value, (list, tuple)):
            return tuple(self._coerce_material(item) for item in value)
        if isinstance(value, Mapping):
            return (self._coerce_material(value),)

        text = str(value).strip()
        if text.startswith("[") or text.startswith("{"):
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError:
                decoded = None
            if isinstance(decoded, list):
                return tuple(self._coerce_material(item) for item in decoded)
            if isinstance(decoded, dict):
                return (self._coerce_material(decoded),)

        parsed = self._material_parser.parse(text)
        parse_failures.extend(parsed.failed)
        return tuple(MaterialEntry(name=item.name, count=item.count) for item in parsed.added)

    def _coerce_material(self, item: Any) -> MaterialEntry:
        if not isinstance(item, Mapping):
            return MaterialEntry(name=self._parse_text(item), count=None)
        return MaterialEntry(
            name=self._parse_text(item.get("name")),
            count=self._parse_int(item.get("count")),
        )

    def _parse_drop_rates(self, value: Any) -> tuple[DropRate, ...]:
        if self._is_blank(value):
            return ()
        if isinstance(value, (list, tuple)):
            return tuple(
                rate for rate in (self._coerce_drop_rate(item) for item in value) if rate is not None
            )

        text = str(value).strip()
        if text.startswith("["):
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError:
                return ()
            if not isinstance(decoded, list):
                return ()
            return tuple(
                rate for rate in (self._coerce_drop_rate(item) for item in decoded) if rate is not None
            )

        rates: list[DropRate] = []
        for token in _DROP_RATE_SPLIT_PATTERN.split(text):
            token = token.strip()
            if not token:
                continue
            match = _DROP_RATE_COLON_PATTERN.match(token) or _DROP_RATE_SPACE_PATTERN.match(token)
            if match is None:
                rates.append(DropRate(item=token, rate=""))
            else:
                rates.append(DropRate(item=match.group(1).strip(), rate=match.group(2).strip()))
        return tuple(rates)

    def _coerce_drop_rate(self, item: Any) -> DropRate | None:
        if isinstance(item, Mapping):
            name = self._parse_text(item.get("item"))
            if name is None:
                return None
            return DropRate(item=name, rate=self._parse_text(item.get("rate")) or "")
        name = self._parse_text(item)
        if name is None:
            return None
        return DropRate(item=name, rate="")
