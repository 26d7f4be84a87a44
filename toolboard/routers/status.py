"""Tool liveness API."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from toolboard.services.aggregator import count_statuses
from toolboard.services.catalog import CatalogState, get_catalog
from toolboard.services.status_probe import StatusProbe, check_statuses
from toolboard.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/status", tags=["status"])


def get_status_probe() -> StatusProbe:
    """FastAPI dependency for the URL prober."""
    return StatusProbe(timeout=settings.STATUS_PROBE_TIMEOUT)


def _status_payload(catalog: CatalogState) -> dict:
    online, offline, checking = count_statuses(catalog.statuses)
    return {
        "online": online,
        "offline": offline,
        "checking": checking,
        "statuses": catalog.statuses,
    }


@router.get("")
async def get_statuses(catalog: CatalogState = Depends(get_catalog)):
    """Liveness counts and the per-tool status map."""
    return _status_payload(catalog)


@router.post("/check")
async def run_status_check(
    catalog: CatalogState = Depends(get_catalog),
    probe: StatusProbe = Depends(get_status_probe),
):
    """Probe every tool URL and store the results."""
    if not settings.STATUS_PROBE_ENABLED:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Status probing is disabled"
        )

    statuses = await check_statuses(
        catalog.tools, probe, concurrency=settings.STATUS_PROBE_CONCURRENCY
    )
    catalog.update_statuses(statuses)
    return _status_payload(catalog)
