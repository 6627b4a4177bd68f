"""
app/api/routers package marker.
"""

from app.api.routers.bulk_import import router as bulk_import_router
from app.api.routers.materials import router as materials_router

__all__ = [
    "bulk_import_router",
    "materials_router",
]
