"""
app/main.py

FastAPI application factory for the farm import API.
"""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)

DATABASE_URL_VARS: tuple[str, ...] = ("DATABASE_URL", "CLOUD_DATABASE_URL", "LOCAL_DATABASE_URL")


def _validate_env() -> None:
    """
    Check startup environment variables before anything touches the database.

    Every problem is collected so one restart fixes them all.
    """

    from app.validators.farm_validator import VersionsRequirement
    from db.config import load_env_files

    load_env_files()

    errors: list[str] = []

    if not any(os.getenv(name, "").strip() for name in DATABASE_URL_VARS):
        errors.append(f"No database URL configured. Set one of: {', '.join(DATABASE_URL_VARS)}.")

    allowed_rules = sorted(rule.value for rule in VersionsRequirement)
    versions_rule = os.getenv("FARM_IMPORT_VERSIONS_RULE", "").strip().lower()
    if versions_rule and versions_rule not in allowed_rules:
        errors.append(
            f"FARM_IMPORT_VERSIONS_RULE='{versions_rule}' is not valid. "
            f"Allowed values: {allowed_rules}."
        )

    if errors:
        raise RuntimeError(
            "Startup validation failed:\n" + "\n".join(f"  - {error}" for error in errors)
        )


def _configure_logging() -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _verify_database() -> None:
    """
    Confirm the database answers and the farms table has been migrated.

    Tables are never created here; a missing table aborts startup.
    """

    from sqlalchemy import inspect, text

    from db.base import Base
    from db.models import Farm  # noqa: F401 (registers the farms table on Base.metadata)
    from db.session import get_engine

    engine = get_engine()
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception as exc:
        raise RuntimeError("Database unavailable.") from exc
    logger.info("Database connectivity confirmed")

    missing = sorted(set(Base.metadata.tables) - set(inspect(engine).get_table_names()))
    if missing:
        logger.critical(
            "Tables missing from the database: %s. Run 'alembic upgrade head' and restart.",
            ", ".join(missing),
        )
        raise RuntimeError(f"Schema mismatch: missing table(s) {', '.join(missing)}.")
    logger.info("Database schema validated")


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    _verify_database()
    yield


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _validate_env()
    _configure_logging()

    application = FastAPI(
        title="Farm Import API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from app.api.routers import bulk_import_router, materials_router
    from app.domain.catalog import get_item_catalog

    application.include_router(bulk_import_router)
    application.include_router(materials_router)

    @application.get("/health")
    def healthcheck() -> dict[str, object]:
        return {"status": "ok", "catalog_items": len(get_item_catalog())}

    return application


app = create_app()
