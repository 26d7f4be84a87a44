"""Shared FastAPI dependencies."""
from fastapi import Depends, Query
from sqlalchemy.orm import Session

from toolboard.db import get_db
from toolboard.services.favorites_store import load_favorites
from toolboard.services.query import ALL, SortOrder


def get_favorites(db: Session = Depends(get_db)) -> frozenset[str]:
    """Favorite tool ids as currently stored."""
    return load_favorites(db)


class ListingParams:
    """Query parameters shared by the listing and the export."""

    def __init__(
        self,
        q: str = Query("", description="Search in tool titles"),
        source: str = Query(ALL, description="Exact source name or 'all'"),
        category: str = Query(ALL, description="Category label or 'all'"),
        sort: SortOrder = Query(SortOrder.DESC, description="Vote ordering"),
    ):
        self.q = q
        self.source = source
        self.category = category
        self.sort = sort
