"""
app/schemas package marker.
"""

from app.schemas.bulk_import import (
    ImportOutcomeResponse,
    ImportPreviewResponse,
    MaterialModel,
    MaterialParseRequest,
    MaterialParseResponse,
    RowFailureResponse,
    RowValidationResponse,
)

__all__ = [
    "ImportOutcomeResponse",
    "ImportPreviewResponse",
    "MaterialModel",
    "MaterialParseRequest",
    "MaterialParseResponse",
    "RowFailureResponse",
    "RowValidationResponse",
]
