"""Side-by-side comparison API."""
from fastapi import APIRouter, Depends

from toolboard.services.catalog import CatalogState, get_catalog
from toolboard.services.selection import COMPARISON_LIMIT, comparison_rows

router = APIRouter(prefix="/api/comparison", tags=["comparison"])


def _comparison_payload(catalog: CatalogState) -> dict:
    return {
        "selected": sorted(catalog.comparison),
        "limit": COMPARISON_LIMIT,
        "rows": comparison_rows(catalog.tools, catalog.comparison, catalog.statuses),
    }


@router.get("")
async def get_comparison(catalog: CatalogState = Depends(get_catalog)):
    """Currently compared tools."""
    return _comparison_payload(catalog)


@router.post("/{tool_id}/toggle")
async def toggle_comparison_tool(
    tool_id: str,
    catalog: CatalogState = Depends(get_catalog),
):
    """Add or remove a tool; adds beyond the limit are ignored."""
    catalog.toggle_comparison(tool_id)
    return _comparison_payload(catalog)


@router.delete("")
async def clear_comparison(catalog: CatalogState = Depends(get_catalog)):
    """Empty the comparison."""
    catalog.clear_comparison()
    return _comparison_payload(catalog)
