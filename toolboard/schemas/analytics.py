"""Derived view schemas: statistics, comparison rows and exports."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from toolboard.schemas.tool import Tool, ToolStatus


class SourceCount(BaseModel):
    """One entry of the top-sources ranking."""
    source: str
    count: int


class StatisticsBundle(BaseModel):
    """Dataset-wide statistics, recomputed from scratch on every change."""
    total_tools: int = 0
    total_votes: int = 0
    total_comments: int = 0
    avg_votes: int = 0
    source_stats: dict[str, int] = Field(default_factory=dict)
    top_sources: list[SourceCount] = Field(default_factory=list)
    trending_tools: list[Tool] = Field(default_factory=list)
    categories: dict[str, list[Tool]] = Field(default_factory=dict)
    online_tools: int = 0
    offline_tools: int = 0
    checking_tools: int = 0
    favorite_count: int = 0


class AnalyticsResponse(BaseModel):
    """Statistics plus each category's share of the collection."""
    analytics: StatisticsBundle
    category_shares: dict[str, float]


class ComparisonRow(BaseModel):
    """One column of the side-by-side comparison table."""
    id: str
    title: Optional[str] = None
    votes: int
    comments: int
    source: str
    status: ToolStatus
    description: Optional[str] = None


class ExportDocument(BaseModel):
    """Self-describing snapshot of the current filtered view."""
    model_config = ConfigDict(populate_by_name=True)

    tools: list[Tool]
    favorites: list[str]
    analytics: StatisticsBundle
    export_date: str = Field(..., alias="exportDate")
