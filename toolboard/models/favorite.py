"""Favorite tool persistence."""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from toolboard.db import Base


class FavoriteTool(Base):
    """Favorite tool table."""

    __tablename__ = "favorite_tools"

    tool_id = Column(String, primary_key=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
