"""Health check endpoints."""
from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.orm import Session
from sqlalchemy import text

from toolboard.db import get_db
from toolboard.services.catalog import CatalogState, get_catalog

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """
    Basic health check - process is alive.

    Returns 200 if the application is running.
    """
    return {"status": "healthy"}


@router.get("/ready")
async def ready(
    response: Response,
    db: Session = Depends(get_db),
    catalog: CatalogState = Depends(get_catalog),
):
    """
    Readiness check - database reachable and tool catalog loaded.

    Returns 200 if ready to serve, 503 if not.
    """
    try:
        with db.connection() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {
            "status": "not_ready",
            "database": "disconnected",
            "error": str(e),
            "message": "Database connection failed"
        }

    if not catalog.is_loaded:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {
            "status": "not_ready",
            "database": "connected",
            "catalog": "empty",
            "error": catalog.last_error,
            "message": "Tools feed has not been loaded; POST /api/refresh to retry"
        }

    return {
        "status": "ready",
        "database": "connected",
        "catalog": "loaded",
        "tool_count": len(catalog.tools),
    }
