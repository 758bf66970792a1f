from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from vibes_api.core.config import Settings, get_settings
from vibes_api.db.session import get_db

router = APIRouter(tags=["health"])


@router.get("/healthz")
def health_check() -> dict[str, str]:
    """Liveness probe; never touches the database."""
    return {"status": "ok"}


@router.get("/readyz")
def readiness_check(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> dict[str, str]:
    db.execute(text("SELECT 1"))
    return {
        "status": "ok",
        "database": "ok",
        "version": settings.app_version,
        "environment": settings.environment,
    }
