"""
app/services package marker.
"""

from app.services.bulk_import_service import (
    BulkImportService,
    BulkImportSession,
    ImportStateError,
    get_bulk_import_service,
    run_import,
)
from app.services.duplicate_detector import DuplicateDetector
from app.services.material_parser_service import (
    MaterialTextParser,
    get_material_text_parser,
    merge_materials,
    parse_materials_from_text,
)
from app.services.template_service import build_template_csv

__all__ = [
    "BulkImportService",
    "BulkImportSession",
    "DuplicateDetector",
    "ImportStateError",
    "MaterialTextParser",
    "build_template_csv",
    "get_bulk_import_service",
    "get_material_text_parser",
    "merge_materials",
    "parse_materials_from_text",
    "run_import",
]
