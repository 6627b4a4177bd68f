"""
app/config.py

Bulk import settings read from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from app.validators.farm_validator import VersionsRequirement
from db.config import load_env_files

DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024
MIN_UPLOAD_BYTES = 1024


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    load_env_files()


def _read_env(name: str) -> str | None:
    """
    Return the trimmed value of ``name``, or None when unset or blank.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _get_bool_env(name: str, default: bool) -> bool:
    raw_value = _read_env(name)
    if raw_value is None:
        return default
    return raw_value.lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    raw_value = _read_env(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_versions_rule_env(name: str, default: VersionsRequirement) -> VersionsRequirement:
    """
    Read the versions requirement rule, falling back on unknown values.
    """

    raw_value = _read_env(name)
    if raw_value is None:
        return default
    try:
        return VersionsRequirement(raw_value.lower())
    except ValueError:
        return default


@dataclass(frozen=True)
class FarmImportSettings:
    """
    Runtime settings for bulk farm import.
    """

    versions_rule: VersionsRequirement = VersionsRequirement.ALWAYS
    log_row_failures: bool = True
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES


@lru_cache(maxsize=1)
def get_farm_import_settings() -> FarmImportSettings:
    """
    Return cached bulk import settings from environment variables.
    """

    return FarmImportSettings(
        versions_rule=_get_versions_rule_env(
            "FARM_IMPORT_VERSIONS_RULE",
            VersionsRequirement.ALWAYS,
        ),
        log_row_failures=_get_bool_env("FARM_IMPORT_LOG_ROW_FAILURES", True),
        max_upload_bytes=max(
            MIN_UPLOAD_BYTES,
            _get_int_env("FARM_IMPORT_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        ),
    )
