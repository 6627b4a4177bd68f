"""
app/validators/farm_validator.py

Record-level validation for bulk farm import.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

from app.data.farm_categories import FARM_CATEGORIES
from app.domain.catalog import ItemCatalog, get_item_catalog
from app.domain.farm_import import ImportRecord, MaterialEntry, ValidationResult

PLATFORMS: tuple[str, ...] = ("Java", "Bedrock")
JAVA_PLATFORM = "Java"

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 5000

_VIDEO_HOST_PATTERN = re.compile(r"youtube\.com|youtu\.be", re.IGNORECASE)


class VersionsRequirement(str, Enum):
    """
    When a record must list at least one game version.

    ALWAYS matches the bulk import form; JAVA_ONLY matches the single upload
    form, where Bedrock-only farms may omit versions.
    """

    ALWAYS = "always"
    JAVA_ONLY = "java_only"


class FarmRecordValidator:
    """
    Validates one normalized record into errors and warnings.
    """

    def __init__(
        self,
        *,
        catalog: ItemCatalog | None = None,
        categories: Iterable[str] = FARM_CATEGORIES,
        versions_rule: VersionsRequirement = VersionsRequirement.ALWAYS,
    ) -> None:
        self._catalog = catalog if catalog is not None else get_item_catalog()
        self._categories = frozenset(categories)
        self._versions_rule = versions_rule

    @property
    def versions_rule(self) -> VersionsRequirement:
        return self._versions_rule

    def validate(self, record: ImportRecord) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []

        self._validate_text(
            record.title,
            label="Title",
            max_length=MAX_TITLE_LENGTH,
            errors=errors,
        )
        self._validate_text(
            record.description,
            label="Description",
            max_length=MAX_DESCRIPTION_LENGTH,
            errors=errors,
        )
        self._validate_category(record.category, errors)
        self._validate_platforms(record.platforms, errors)
        self._validate_versions(record, errors)
        self._validate_materials(
            record.materials,
            label="Material",
            errors=errors,
            warnings=warnings,
        )
        self._validate_materials(
            record.optional_materials,
            label="Optional material",
            errors=errors,
            warnings=warnings,
        )

        if record.estimated_time_minutes is not None and record.estimated_time_minutes < 0:
            errors.append("Estimated time must be a non-negative number of minutes")

        for item in record.farmable_items:
            if item not in self._catalog:
                warnings.append(f'Farmable item "{item}" may not be a valid Minecraft item')

        if record.video_url and not _VIDEO_HOST_PATTERN.search(record.video_url):
            warnings.append("Video URL does not appear to be a YouTube URL")

        for chunk in record.material_parse_failures:
            warnings.append(f"Could not match material text: {chunk}")

        return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))

    @staticmethod
    def _validate_text(
        value: str | None,
        *,
        label: str,
        max_length: int,
        errors: list[str],
    ) -> None:
        if not value or not value.strip():
            errors.append(f"{label} is required")
        elif len(value) > max_length:
            errors.append(f"{label} must be at most {max_length} characters")

    def _validate_category(self, category: str | None, errors: list[str]) -> None:
        if not category or not category.strip():
            errors.append("Category is required")
        elif category not in self._categories:
            errors.append(
                f"Invalid category: {category}. Must be one of the available categories."
            )

    @staticmethod
    def _validate_platforms(platforms: tuple[str, ...], errors: list[str]) -> None:
        if not platforms:
            errors.append("At least one platform is required (Java or Bedrock)")
            return

        invalid = [platform for platform in platforms if platform not in PLATFORMS]
        if invalid:
            errors.append(f"Invalid platforms: {', '.join(invalid)}. Must be Java or Bedrock")

    def _validate_versions(self, record: ImportRecord, errors: list[str]) -> None:
        if record.versions:
            return
        if (
            self._versions_rule is VersionsRequirement.JAVA_ONLY
            and JAVA_PLATFORM not in record.platforms
        ):
            return
        errors.append("At least one version is required")

    def _validate_materials(
        self,
        materials: tuple[MaterialEntry, ...],
        *,
        label: str,
        errors: list[str],
        warnings: list[str],
    ) -> None:
        for position, material in enumerate(materials, start=1):
            if not material.name:
                errors.append(f"{label} {position}: name is required")
            elif material.name not in self._catalog:
                warnings.append(
                    f'{label} {position}: "{material.name}" may not be a valid Minecraft item'
                )
            if material.count is None or material.count < 1:
                errors.append(f"{label} {position}: count must be at least 1")


def validate_record(
    record: ImportRecord,
    *,
    validator: FarmRecordValidator | None = None,
) -> ValidationResult:
    """
    Validate one record with the given validator, or production defaults.
    """

    return (validator or FarmRecordValidator()).validate(record)
