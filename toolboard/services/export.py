"""Snapshot export of the current filtered view."""
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from toolboard.schemas.analytics import ExportDocument, StatisticsBundle
from toolboard.schemas.tool import Tool

EXPORT_FILENAME = "ai-tools-export.json"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with a trailing Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_export(
    filtered_tools: Sequence[Tool],
    favorites: Iterable[str],
    statistics: StatisticsBundle,
    now: Optional[datetime] = None
) -> ExportDocument:
    """
    Build the export document.

    Args:
        filtered_tools: Tools in the current listing, in listing order
        favorites: Favorite tool ids
        statistics: Statistics bundle for the whole collection
        now: Export time; defaults to the current UTC time

    Returns:
        ExportDocument with favorites sorted for a stable output
    """
    moment = now or datetime.now(timezone.utc)
    return ExportDocument(
        tools=list(filtered_tools),
        favorites=sorted(set(favorites)),
        analytics=statistics,
        export_date=format_timestamp(moment),
    )


def export_filename() -> str:
    return EXPORT_FILENAME
