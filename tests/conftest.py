from __future__ import annotations

import pytest

from app.domain.catalog import ItemCatalog
from app.domain.farm_import import ImportRecord
from app.mappers.item_resolver import ItemResolver
from app.mappers.record_normalizer import RecordNormalizer
from app.repositories.farm_repository import FarmStorage, InsertResult
from app.services.material_parser_service import MaterialTextParser
from app.validators.farm_validator import FarmRecordValidator

FIXTURE_ITEMS = (
    "Cobbled Deepslate",
    "Scaffolding",
    "Obsidian",
    "Torch",
    "Redstone Torch",
    "Chest",
    "Hopper",
    "Iron Ingot",
    "Glass",
    "Oak Slab",
    "Water Bucket",
    "Villager",
)

FIXTURE_CATEGORIES = ("Iron Farm", "Gold Farm", "Mob Farm")


class InMemoryFarmStorage(FarmStorage):
    """
    Dict-backed storage that records every call.
    """

    def __init__(
        self,
        *,
        existing_slugs: tuple[str, ...] = (),
        reject: dict[str, str] | None = None,
        explode: dict[str, Exception] | None = None,
    ) -> None:
        self.rows: dict[str, ImportRecord | str] = {slug: slug for slug in existing_slugs}
        self.find_calls: list[str] = []
        self.insert_calls: list[ImportRecord] = []
        self._reject = reject or {}
        self._explode = explode or {}

    def find_by_slug(self, slug: str) -> ImportRecord | str | None:
        self.find_calls.append(slug)
        return self.rows.get(slug)

    def insert(self, record: ImportRecord) -> InsertResult:
        self.insert_calls.append(record)
        if record.slug in self._explode:
            raise self._explode[record.slug]
        if record.slug in self._reject:
            return InsertResult(ok=False, message=self._reject[record.slug])
        self.rows[record.slug] = record
        return InsertResult(ok=True)


@pytest.fixture()
def catalog() -> ItemCatalog:
    return ItemCatalog(FIXTURE_ITEMS)


@pytest.fixture()
def resolver(catalog: ItemCatalog) -> ItemResolver:
    return ItemResolver(catalog)


@pytest.fixture()
def material_parser(resolver: ItemResolver) -> MaterialTextParser:
    return MaterialTextParser(resolver)


@pytest.fixture()
def normalizer(material_parser: MaterialTextParser) -> RecordNormalizer:
    return RecordNormalizer(material_parser)


@pytest.fixture()
def validator(catalog: ItemCatalog) -> FarmRecordValidator:
    return FarmRecordValidator(catalog=catalog, categories=FIXTURE_CATEGORIES)


@pytest.fixture()
def storage() -> InMemoryFarmStorage:
    return InMemoryFarmStorage()


@pytest.fixture()
def storage_factory() -> type[InMemoryFarmStorage]:
    return InMemoryFarmStorage
