"""
app/domain/catalog.py

Immutable item catalog with case-insensitive lookups.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache

from app.data.minecraft_items import MINECRAFT_ITEMS


class ItemCatalog:
    """
    Ordered, read-only set of canonical item names.
    """

    def __init__(self, items: Iterable[str]) -> None:
        ordered: list[str] = []
        index: dict[str, str] = {}
        for item in items:
            name = str(item).strip()
            key = name.lower()
            if not name or key in index:
                continue
            ordered.append(name)
            index[key] = name
        self._items: tuple[str, ...] = tuple(ordered)
        self._index: dict[str, str] = index

    @property
    def items(self) -> tuple[str, ...]:
        return self._items

    def lookup(self, name: str) -> str | None:
        """
        Return the canonical spelling for ``name`` or None when absent.
        """

        return self._index.get(name.strip().lower())

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.lookup(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


@lru_cache(maxsize=1)
def get_item_catalog() -> ItemCatalog:
    """
    Return the cached production catalog.
    """

    return ItemCatalog(MINECRAFT_ITEMS)
