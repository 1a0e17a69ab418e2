"""Health check endpoint."""
from __future__ import annotations

from pathlib import Path

from alembic.config import Config
from alembic.script import ScriptDirectory
from fastapi import APIRouter
from sqlalchemy import text

from app.core.logging import get_logger
from app.db import init_engine

router = APIRouter(prefix="/health", tags=["health"])
logger = get_logger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def _db_status() -> str:
    """Return 'ok' if the DB is reachable, 'error' otherwise."""

    try:
        with init_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return "ok"
    except Exception:  # noqa: BLE001
        logger.exception("DB health check failed")
        return "error"


def _expected_migration_head() -> str | None:
    try:
        script = ScriptDirectory.from_config(Config(str(ALEMBIC_INI)))
        return script.get_current_head()
    except Exception:  # noqa: BLE001
        logger.exception("Failed to load Alembic head revision")
        return None


def _migrations_status() -> str:
    expected_head = _expected_migration_head()
    if expected_head is None:
        return "unknown"
    try:
        with init_engine().connect() as conn:
            current = conn.execute(text("SELECT version_num FROM alembic_version")).scalar()
    except Exception:  # noqa: BLE001
        logger.exception("Migration check failed")
        return "unknown"
    return "up_to_date" if current == expected_head else "out_of_date"


@router.get("", summary="Health check")
def healthcheck() -> dict[str, object]:
    """Report database reachability and migration state."""

    db_status = _db_status()
    db_ok = db_status == "ok"
    migrations_status = _migrations_status() if db_ok else "unknown"
    degraded = not (db_ok and migrations_status == "up_to_date")
    return {
        "status": "degraded" if degraded else "ok",
        "db_ok": db_ok,
        "db_status": db_status,
        "migrations_status": migrations_status,
    }
