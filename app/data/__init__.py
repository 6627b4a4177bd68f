"""
app/data package marker.
"""

from app.data.farm_categories import FARM_CATEGORIES
from app.data.minecraft_items import MINECRAFT_ITEMS

__all__ = ["FARM_CATEGORIES", "MINECRAFT_ITEMS"]
