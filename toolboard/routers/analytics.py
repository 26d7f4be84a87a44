"""Dashboard statistics API."""
from fastapi import APIRouter, Depends

from toolboard.dependencies import get_favorites
from toolboard.schemas.analytics import AnalyticsResponse
from toolboard.services.aggregator import aggregate, category_shares
from toolboard.services.catalog import CatalogState, get_catalog

router = APIRouter(prefix="/api", tags=["analytics"])


@router.get("/analytics", response_model=AnalyticsResponse)
async def get_analytics(
    favorites: frozenset[str] = Depends(get_favorites),
    catalog: CatalogState = Depends(get_catalog),
):
    """Statistics bundle for the whole collection."""
    bundle = aggregate(catalog.tools, catalog.statuses, favorites)
    return AnalyticsResponse(analytics=bundle, category_shares=category_shares(bundle))
