"""
app/mappers package marker.
"""

from app.mappers.item_resolver import ItemResolution, ItemResolver
from app.mappers.record_normalizer import RecordNormalizer

__all__ = [
    "ItemResolution",
    "ItemResolver",
    "RecordNormalizer",
]
