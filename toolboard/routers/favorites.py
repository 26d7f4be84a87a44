"""Favorites API."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from toolboard.db import get_db
from toolboard.dependencies import get_favorites
from toolboard.services.catalog import CatalogState, get_catalog
from toolboard.services.favorites_store import save_favorites
from toolboard.services.selection import select_tools, toggle_favorite

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("")
async def list_favorites(
    favorites: frozenset[str] = Depends(get_favorites),
    catalog: CatalogState = Depends(get_catalog),
):
    """Favorite ids plus the favorite tools present in the catalog."""
    return {
        "favorites": sorted(favorites),
        "tools": select_tools(catalog.tools, favorites),
    }


@router.post("/{tool_id}/toggle")
async def toggle_favorite_tool(
    tool_id: str,
    favorites: frozenset[str] = Depends(get_favorites),
    db: Session = Depends(get_db),
):
    """Add or remove a tool from favorites."""
    updated = toggle_favorite(favorites, tool_id)
    save_favorites(db, updated)
    return {
        "tool_id": tool_id,
        "is_favorite": tool_id in updated,
        "favorite_count": len(updated),
    }
