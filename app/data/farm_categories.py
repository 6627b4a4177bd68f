"""
app/data/farm_categories.py

Fixed set of farm categories accepted on import.
"""

from __future__ import annotations

FARM_CATEGORIES: tuple[str, ...] = (
    "Iron Farm",
    "Gold Farm",
    "XP Farm",
    "Mob Farm",
    "Crop Farm",
    "Tree Farm",
    "Sugar Cane Farm",
    "Bamboo Farm",
    "Kelp Farm",
    "Pumpkin Farm",
    "Melon Farm",
    "Wool Farm",
    "Honey Farm",
    "Slime Farm",
    "Creeper Farm",
    "Guardian Farm",
    "Shulker Farm",
    "Blaze Farm",
    "Wither Skeleton Farm",
    "Enderman Farm",
    "Raid Farm",
    "Villager Trading Hall",
    "Breeder",
    "Storage System",
    "Item Sorter",
    "Flying Machine",
    "Other",
)
