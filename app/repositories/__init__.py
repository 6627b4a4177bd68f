"""
app/repositories package marker.
"""

from app.repositories.farm_repository import FarmRepository, FarmStorage, InsertResult

__all__ = [
    "FarmRepository",
    "FarmStorage",
    "InsertResult",
]
