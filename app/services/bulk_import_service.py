"""
app/services/bulk_import_service.py

Service layer for bulk farm import.

One BulkImportSession walks a single uploaded batch through
Idle -> Parsed -> Validated -> Importing -> Completed:

    1. load()      parses the file and normalizes each row
    2. validate()  validates every record independently
    3. run()       persists valid, non-duplicate records one row at a time

Rows are imported sequentially so a slug inserted by row N is visible to the
duplicate check of row N+1. Row-level problems are captured in the
ImportOutcome and never raised; only file-level parse failures raise.
There is no all-or-nothing mode: rows that succeed stay persisted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping

from app.config import get_farm_import_settings
from app.domain.farm_import import (
    DUPLICATE_TITLE_MESSAGE,
    ImportOutcome,
    ImportRecord,
    ImportState,
    PreviewSummary,
    RowFailure,
    ValidationResult,
)
from app.mappers.record_normalizer import RecordNormalizer
from app.services.material_parser_service import get_material_text_parser
from app.parsers.import_file import ImportFileError, parse_import_file
from app.repositories.farm_repository import FarmStorage
from app.services.duplicate_detector import DuplicateDetector
from app.validators.farm_validator import FarmRecordValidator

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ImportStateError(RuntimeError):
    """
    Raised when a session operation is called from the wrong state.
    """


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class BulkImportSession:
    """
    Drives one batch through parsing, validation and persistence.
    """

    def __init__(
        self,
        *,
        storage: FarmStorage,
        normalizer: RecordNormalizer | None = None,
        validator: FarmRecordValidator | None = None,
        log_row_failures: bool = True,
    ) -> None:
        self._storage = storage
        self._normalizer = normalizer or RecordNormalizer(get_material_text_parser())
        self._validator = validator or FarmRecordValidator()
        self._duplicate_detector = DuplicateDetector(storage)
        self._log_row_failures = log_row_failures
        self._state = ImportState.IDLE
        self._records: list[ImportRecord] = []
        self._results: list[ValidationResult] = []
        self._outcome: ImportOutcome | None = None

    @property
    def state(self) -> ImportState:
        return self._state

    @property
    def records(self) -> tuple[ImportRecord, ...]:
        return tuple(self._records)

    @property
    def validation_results(self) -> tuple[ValidationResult, ...]:
        return tuple(self._results)

    @property
    def outcome(self) -> ImportOutcome:
        self._require_state(ImportState.COMPLETED, operation="outcome")
        assert self._outcome is not None
        return self._outcome

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def load(self, filename: str | None, content: bytes | str) -> tuple[ImportRecord, ...]:
        """
        Parse an uploaded file and normalize its rows.

        Raises ImportFileError and stays Idle when the file is unusable.
        """

        self._require_state(ImportState.IDLE, operation="load")
        raw_rows = parse_import_file(filename, content)
        self.load_rows(raw_rows)
        logger.info("Bulk import file parsed filename=%r rows=%d", filename, len(self._records))
        return self.records

    def load_rows(self, raw_rows: Sequence[Mapping[str, Any]]) -> tuple[ImportRecord, ...]:
        """
        Normalize already-decoded rows, e.g. a JSON request body.
        """

        self._require_state(ImportState.IDLE, operation="load_rows")
        if not raw_rows:
            raise ImportFileError("File contains no data rows.")
        self._records = [self._normalizer.normalize(row) for row in raw_rows]
        self._state = ImportState.PARSED
        return self.records

    def validate(self) -> tuple[ValidationResult, ...]:
        self._require_state(ImportState.PARSED, operation="validate")
        self._results = [self._validator.validate(record) for record in self._records]
        self._state = ImportState.VALIDATED
        summary = self.preview()
        logger.info(
            "Bulk import validated valid=%d errors=%d warnings=%d",
            summary.valid_count,
            summary.error_count,
            summary.warning_count,
        )
        return self.validation_results

    def update_record(self, index: int, record: ImportRecord) -> ValidationResult:
        """
        Replace one reviewed record and re-validate it.
        """

        self._require_state(ImportState.VALIDATED, operation="update_record")
        if not 0 <= index < len(self._records):
            raise IndexError(f"Row index {index} is out of range.")
        result = self._validator.validate(record)
        self._records[index] = record
        self._results[index] = result
        return result

    def preview(self) -> PreviewSummary:
        self._require_state(ImportState.VALIDATED, operation="preview")
        valid_count = sum(1 for result in self._results if result.valid)
        return PreviewSummary(
            valid_count=valid_count,
            error_count=len(self._results) - valid_count,
            warning_count=sum(len(result.warnings) for result in self._results),
        )

    def run(self, *, cancel_requested: Callable[[], bool] | None = None) -> ImportOutcome:
        """
        Import every validated row in original order.

        When ``cancel_requested`` returns True between rows, the remaining
        rows are counted as skipped and the session completes.
        """

        self._require_state(ImportState.VALIDATED, operation="run")
        self._state = ImportState.IMPORTING

        success_count = 0
        skipped_count = 0
        failures: list[RowFailure] = []

        for index, (record, result) in enumerate(zip(self._records, self._results)):
            if cancel_requested is not None and cancel_requested():
                skipped_count = len(self._records) - index
                logger.info("Bulk import cancelled skipped=%d", skipped_count)
                break

            errors = self._import_row(record, result)
            if errors:
                failure = RowFailure(row_index=index, title=record.display_title, errors=errors)
                self._record_failure(failure)
                failures.append(failure)
            else:
                success_count += 1

        self._outcome = ImportOutcome(
            success_count=success_count,
            failure_count=len(failures),
            skipped_count=skipped_count,
            per_row_failures=tuple(failures),
        )
        self._state = ImportState.COMPLETED
        logger.info(
            "Bulk import completed success=%d failed=%d skipped=%d",
            self._outcome.success_count,
            self._outcome.failure_count,
            self._outcome.skipped_count,
        )
        return self._outcome

    def reset(self) -> None:
        self._state = ImportState.IDLE
        self._records = []
        self._results = []
        self._outcome = None

    # ------------------------------------------------------------------
    # Import internals
    # ------------------------------------------------------------------

    def _import_row(self, record: ImportRecord, result: ValidationResult) -> tuple[str, ...]:
        if not result.valid:
            return result.errors

        try:
            if self._duplicate_detector.is_duplicate(record):
                return (DUPLICATE_TITLE_MESSAGE,)
            inserted = self._storage.insert(record)
        except Exception as exc:  # noqa: BLE001
            return (str(exc) or UNKNOWN_ERROR_MESSAGE,)

        if not inserted.ok:
            return (inserted.message or UNKNOWN_ERROR_MESSAGE,)
        return ()

    def _record_failure(self, failure: RowFailure) -> None:
        if not self._log_row_failures:
            return
        logger.warning(
            "Bulk import row failed row=%s title=%r errors=%s",
            failure.row_number,
            failure.title,
            "; ".join(failure.errors),
        )

    def _require_state(self, expected: ImportState, *, operation: str) -> None:
        if self._state is not expected:
            raise ImportStateError(
                f"Cannot {operation} while import is {self._state.value}; "
                f"expected {expected.value}."
            )


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BulkImportService:
    """
    Builds import sessions wired with shared normalizer and validator.
    """

    normalizer: RecordNormalizer
    validator: FarmRecordValidator
    log_row_failures: bool = True

    def create_session(self, storage: FarmStorage) -> BulkImportSession:
        return BulkImportSession(
            storage=storage,
            normalizer=self.normalizer,
            validator=self.validator,
            log_row_failures=self.log_row_failures,
        )

    def run_import(
        self,
        filename: str | None,
        content: bytes | str,
        *,
        storage: FarmStorage,
        cancel_requested: Callable[[], bool] | None = None,
    ) -> ImportOutcome:
        """
        Parse, validate and import one file end to end.
        """

        session = self.create_session(storage)
        session.load(filename, content)
        session.validate()
        return session.run(cancel_requested=cancel_requested)


@lru_cache(maxsize=1)
def get_bulk_import_service() -> BulkImportService:
    """
    Build and cache the import service with env-driven settings.
    """

    settings = get_farm_import_settings()
    return BulkImportService(
        normalizer=RecordNormalizer(get_material_text_parser()),
        validator=FarmRecordValidator(versions_rule=settings.versions_rule),
        log_row_failures=settings.log_row_failures,
    )


def run_import(
    filename: str | None,
    content: bytes | str,
    *,
    storage: FarmStorage,
    service: BulkImportService | None = None,
    cancel_requested: Callable[[], bool] | None = None,
) -> ImportOutcome:
    """
    Programmatic entry point: import one CSV or JSON file into ``storage``.
    """

    return (service or get_bulk_import_service()).run_import(
        filename,
        content,
        storage=storage,
        cancel_requested=cancel_requested,
    )
