"""Export API."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from toolboard.dependencies import ListingParams, get_favorites
from toolboard.services.aggregator import aggregate
from toolboard.services.catalog import CatalogState, get_catalog
from toolboard.services.export import build_export, export_filename
from toolboard.services.query import query_tools

router = APIRouter(prefix="/api", tags=["export"])


@router.get("/export")
async def export_tools(
    params: ListingParams = Depends(),
    favorites: frozenset[str] = Depends(get_favorites),
    catalog: CatalogState = Depends(get_catalog),
):
    """Download the current listing, favorites and statistics as JSON."""
    bundle = aggregate(catalog.tools, catalog.statuses, favorites)
    filtered = query_tools(
        catalog.tools,
        search_term=params.q,
        source_filter=params.source,
        category_filter=params.category,
        categories=bundle.categories,
        sort_order=params.sort,
    )
    document = build_export(filtered, favorites, bundle)

    return JSONResponse(
        content=document.model_dump(mode="json", by_alias=True),
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )
