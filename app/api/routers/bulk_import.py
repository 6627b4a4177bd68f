"""
app/api/routers/bulk_import.py

Bulk farm import HTTP endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile, status

from app.api.dependencies import get_farm_storage, get_import_upload
from app.config import get_farm_import_settings
from app.parsers.import_file import ImportFileError
from app.repositories.farm_repository import FarmStorage
from app.schemas.bulk_import import (
    ImportOutcomeResponse,
    ImportPreviewResponse,
    RowFailureResponse,
    RowValidationResponse,
)
from app.services.bulk_import_service import BulkImportService, get_bulk_import_service
from app.services.template_service import TEMPLATE_FILENAME, build_template_csv

router = APIRouter(prefix="/bulk-import", tags=["bulk-import"])


def _read_upload(file: UploadFile) -> bytes:
    limit = get_farm_import_settings().max_upload_bytes
    try:
        content = file.file.read(limit + 1)
    finally:
        file.file.close()
    if len(content) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Upload exceeds {limit} bytes.",
        )
    return content


@router.post("/preview", response_model=ImportPreviewResponse)
def preview_import(
    file: UploadFile = Depends(get_import_upload),
    storage: FarmStorage = Depends(get_farm_storage),
    import_service: BulkImportService = Depends(get_bulk_import_service),
) -> ImportPreviewResponse:
    """
    Parse and validate a file without persisting anything.
    """

    content = _read_upload(file)
    session = import_service.create_session(storage)
    try:
        records = session.load(file.filename, content)
    except ImportFileError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    results = session.validate()
    summary = session.preview()
    return ImportPreviewResponse(
        valid_count=summary.valid_count,
        error_count=summary.error_count,
        warning_count=summary.warning_count,
        rows=[
            RowValidationResponse(
                row_number=index + 2,
                title=record.display_title,
                slug=record.slug,
                valid=result.valid,
                errors=list(result.errors),
                warnings=list(result.warnings),
            )
            for index, (record, result) in enumerate(zip(records, results))
        ],
    )


@router.post("", response_model=ImportOutcomeResponse)
def run_bulk_import(
    file: UploadFile = Depends(get_import_upload),
    storage: FarmStorage = Depends(get_farm_storage),
    import_service: BulkImportService = Depends(get_bulk_import_service),
) -> ImportOutcomeResponse:
    """
    Import every valid, non-duplicate row of one file.
    """

    content = _read_upload(file)
    try:
        outcome = import_service.run_import(file.filename, content, storage=storage)
    except ImportFileError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return ImportOutcomeResponse(
        success_count=outcome.success_count,
        failure_count=outcome.failure_count,
        skipped_count=outcome.skipped_count,
        per_row_failures=[
            RowFailureResponse(
                row_index=failure.row_index,
                row_number=failure.row_number,
                title=failure.title,
                errors=list(failure.errors),
            )
            for failure in outcome.per_row_failures
        ],
    )


@router.get("/template")
def download_template() -> Response:
    """
    CSV template with two example farms.
    """

    return Response(
        content=build_template_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{TEMPLATE_FILENAME}"'},
    )
