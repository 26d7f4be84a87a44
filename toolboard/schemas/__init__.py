"""Pydantic schemas."""
from toolboard.schemas.tool import Tool, ToolStatus, coerce_tools
from toolboard.schemas.analytics import (
    SourceCount,
    StatisticsBundle,
    AnalyticsResponse,
    ComparisonRow,
    ExportDocument,
)

__all__ = [
    "Tool",
    "ToolStatus",
    "coerce_tools",
    "SourceCount",
    "StatisticsBundle",
    "AnalyticsResponse",
    "ComparisonRow",
    "ExportDocument",
]
