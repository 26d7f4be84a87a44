"""Database models."""
from toolboard.models.favorite import FavoriteTool

__all__ = [
    "FavoriteTool",
]
