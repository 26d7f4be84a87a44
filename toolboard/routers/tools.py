"""Tool listing, detail, trending and refresh API."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from toolboard.dependencies import ListingParams
from toolboard.routers.status import get_status_probe
from toolboard.schemas.tool import Tool, ToolStatus
from toolboard.services.aggregator import aggregate
from toolboard.services.catalog import CatalogState, get_catalog
from toolboard.services.categorizer import CATEGORY_LABELS, categorize, categorize_tools
from toolboard.services.feed import FeedError, fetch_tools
from toolboard.services.query import available_sources, query_tools
from toolboard.services.recommender import recommend
from toolboard.services.status_probe import StatusProbe
from toolboard.settings import settings
from toolboard.startup import schedule_status_check

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tools"])


@router.get("/tools")
async def list_tools(
    params: ListingParams = Depends(),
    catalog: CatalogState = Depends(get_catalog),
):
    """Filtered and sorted tool listing."""
    tools = query_tools(
        catalog.tools,
        search_term=params.q,
        source_filter=params.source,
        category_filter=params.category,
        sort_order=params.sort,
    )
    return {"count": len(tools), "tools": tools}


@router.get("/tools/{tool_id}")
async def get_tool_detail(
    tool_id: str,
    catalog: CatalogState = Depends(get_catalog),
):
    """Single tool with its category, liveness and similar tools."""
    tool = catalog.get_tool(tool_id)
    if not tool:
        raise HTTPException(status_code=404, detail="Tool not found")

    return {
        "tool": tool,
        "category": categorize(tool),
        "status": catalog.statuses.get(tool_id, ToolStatus.CHECKING),
        "recommendations": recommend(tool_id, categorize_tools(catalog.tools)),
    }


@router.get("/tools/{tool_id}/recommendations", response_model=list[Tool])
async def get_tool_recommendations(
    tool_id: str,
    catalog: CatalogState = Depends(get_catalog),
):
    """Similar tools; unknown ids get an empty list."""
    return recommend(tool_id, categorize_tools(catalog.tools))


@router.get("/trending", response_model=list[Tool])
async def get_trending(catalog: CatalogState = Depends(get_catalog)):
    """Top tools above the average vote count."""
    return aggregate(catalog.tools).trending_tools


@router.get("/filters")
async def get_filters(catalog: CatalogState = Depends(get_catalog)):
    """Options for the source and category filters."""
    bundle = aggregate(catalog.tools)
    return {
        "sources": available_sources(bundle),
        "categories": CATEGORY_LABELS,
    }


@router.post("/refresh")
async def refresh_tools(
    catalog: CatalogState = Depends(get_catalog),
    probe: StatusProbe = Depends(get_status_probe),
):
    """Reload the tool collection from the feed and re-check liveness."""
    try:
        tools = await catalog.refresh(
            lambda: fetch_tools(settings.TOOLS_FEED_URL, timeout=settings.FEED_TIMEOUT)
        )
    except FeedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    status_task = schedule_status_check(catalog, probe)
    return {
        "status": "refreshed",
        "tool_count": len(tools),
        "status_check": "started" if status_task else "disabled",
    }
