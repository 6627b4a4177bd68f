"""
app/schemas/bulk_import.py

Request/response schemas for bulk import and material parsing endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MaterialModel(BaseModel):
    """
    One resolved material with its count.
    """

    name: str
    count: int = Field(..., ge=1)


class MaterialParseRequest(BaseModel):
    """
    Free-form material text plus materials the caller already holds.
    """

    text: str = ""
    existing: list[MaterialModel] = Field(default_factory=list)


class MaterialParseResponse(BaseModel):
    added: list[MaterialModel] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)


class RowValidationResponse(BaseModel):
    """
    API response model for one validated row awaiting review.
    """

    row_number: int = Field(..., ge=2)
    title: str
    slug: str
    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ImportPreviewResponse(BaseModel):
    valid_count: int = Field(..., ge=0)
    error_count: int = Field(..., ge=0)
    warning_count: int = Field(..., ge=0)
    rows: list[RowValidationResponse] = Field(default_factory=list)


class RowFailureResponse(BaseModel):
    """
    API response model for one row that was not imported.
    """

    row_index: int = Field(..., ge=0)
    row_number: int = Field(..., ge=2)
    title: str
    errors: list[str] = Field(default_factory=list)


class ImportOutcomeResponse(BaseModel):
    """
    API response model for a completed bulk import.
    """

    success_count: int = Field(..., ge=0)
    failure_count: int = Field(..., ge=0)
    skipped_count: int = Field(0, ge=0)
    per_row_failures: list[RowFailureResponse] = Field(default_factory=list)
