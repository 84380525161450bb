"""
Health check endpoints.

/health reports that the process is up; /health/db probes the database.
"""

import logging
from typing import Dict
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.database import get_engine, ping_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    """
    return {"status": "ok"}


@router.get("/health/db")
def db_health_check(engine: Engine = Depends(get_engine)):
    """
    Database connectivity check.

    Polls the database every 200ms for up to DB_HEALTH_TIMEOUT seconds.
    Runs on a worker thread, so the wait never blocks other requests.
    Returns 503 with the last connection error if the database stays down.
    """
    try:
        ping_db(engine, settings.DB_HEALTH_TIMEOUT)
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "db_down", "error": str(e)}
        )

    return {"status": "db_ok"}
