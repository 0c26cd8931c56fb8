"""
Liveness and service info routes
"""
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront import __version__
from storefront.config import settings
from storefront.database import get_db

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["health"])


def _database_reachable(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("health.database_unreachable")
        return False
    return True


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Report whether the service can reach its database; 503 when it cannot"""
    db_connected = _database_reachable(db)
    body = {
        "service": settings.SERVICE_NAME,
        "status": "ok" if db_connected else "unavailable",
        "db_connected": db_connected,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
    if not db_connected:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body


@router.get("/")
def root():
    return {
        "service": settings.SERVICE_NAME,
        "version": __version__,
        "docs": "/docs"
    }
