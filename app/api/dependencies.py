"""
app/api/dependencies.py

Shared FastAPI dependencies for request validation.
"""

from __future__ import annotations

from fastapi import Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.repositories.farm_repository import FarmRepository
from db.session import get_db

IMPORT_CONTENT_TYPES = {
    "text/csv",
    "application/csv",
    "application/vnd.ms-excel",
    "application/json",
    "text/json",
}

IMPORT_EXTENSIONS = (".csv", ".json")


def get_import_upload(file: UploadFile = File(...)) -> UploadFile:
    """
    Validate that the uploaded file is CSV or JSON by extension or MIME type.
    """

    filename = (file.filename or "").strip().lower()
    content_type = (file.content_type or "").strip().lower()

    is_import_filename = filename.endswith(IMPORT_EXTENSIONS)
    is_import_content_type = content_type in IMPORT_CONTENT_TYPES

    if not is_import_filename and not is_import_content_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only CSV or JSON files are allowed.",
        )

    return file


def get_farm_storage(db: Session = Depends(get_db)) -> FarmRepository:
    """
    Farm storage bound to the request's database session.
    """

    return FarmRepository(db)
