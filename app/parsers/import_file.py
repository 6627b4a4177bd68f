"""
app/parsers/import_file.py

File-level parsing of bulk import uploads into raw row mappings.

The file extension picks the parser: ``.csv`` is read as a header-keyed
table, anything else as JSON.
"""

from __future__ import annotations

import csv
import io
import json
from typing import Any


class ImportFileError(ValueError):
    """
    Raised when an uploaded file cannot be parsed into rows.
    """


def is_csv_filename(filename: str | None) -> bool:
    return (filename or "").strip().lower().endswith(".csv")


def parse_import_file(filename: str | None, content: bytes | str) -> list[dict[str, Any]]:
    """
    Parse an uploaded CSV or JSON file into raw row mappings.

    Raises ImportFileError for undecodable, malformed or empty files.
    """

    text = _decode(content)
    if is_csv_filename(filename):
        rows = parse_csv_rows(text)
    else:
        rows = parse_json_rows(text)

    if not rows:
        raise ImportFileError("File contains no data rows.")
    return rows


def parse_csv_rows(text: str) -> list[dict[str, Any]]:
    """
    Read a header-keyed CSV, trimming headers and cells and skipping blank rows.
    """

    try:
        reader = csv.DictReader(io.StringIO(text, newline=""))
        headers = reader.fieldnames or []
        if not any(header and header.strip() for header in headers):
            raise ImportFileError("CSV header row is missing.")

        rows: list[dict[str, Any]] = []
        for raw_row in reader:
            row: dict[str, Any] = {}
            for key, value in raw_row.items():
                if key is None or not key.strip():
                    continue
                row[key.strip()] = value.strip() if isinstance(value, str) else value
            if all(value is None or value == "" for value in row.values()):
                continue
            rows.append(row)
    except csv.Error as exc:
        raise ImportFileError(f"Invalid CSV format: {exc}") from exc

    return rows


def parse_json_rows(text: str) -> list[dict[str, Any]]:
    """
    Read a top-level JSON array of objects, or one object as a single row.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportFileError("Invalid JSON format") from exc

    items = data if isinstance(data, list) else [data]
    for position, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise ImportFileError(f"JSON entry {position} must be an object.")
    return list(items)


def _decode(content: bytes | str) -> str:
    if isinstance(content, str):
        return content.lstrip("\ufeff")
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ImportFileError("File must be UTF-8 encoded.") from exc
