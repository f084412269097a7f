# File: beaver_core/api/routes_health.py

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from beaver_core.api.deps import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _database_healthy(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed: %s", exc)
        return False
    return True


@router.get("/healthz", summary="Liveness and dependency status")
def health(request: Request, db: Session = Depends(get_db)):
    """
    Report that the process is up, which profile it runs under, and
    whether the database answers. Always 200; a dead database only shows
    up in ``services``.
    """
    return {
        "status": "ok",
        "profile": request.app.state.settings.profile,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "database": "healthy" if _database_healthy(db) else "unhealthy",
        },
    }
