"""
app/parsers package marker.
"""

from app.parsers.import_file import ImportFileError, parse_import_file
from app.parsers.material_text import extract_entry, tokenize_entries

__all__ = [
    "ImportFileError",
    "extract_entry",
    "parse_import_file",
    "tokenize_entries",
]
