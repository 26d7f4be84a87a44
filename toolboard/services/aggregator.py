"""Dataset-wide statistics over a tool collection."""
import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from toolboard.schemas.analytics import SourceCount, StatisticsBundle
from toolboard.schemas.tool import ToolStatus, coerce_tools
from toolboard.services.categorizer import CATEGORY_LABELS, categorize_tools
from toolboard.services.trending import select_trending

logger = logging.getLogger(__name__)

TOP_SOURCES_LIMIT = 5


def count_statuses(status_map: Optional[Mapping[str, Any]]) -> tuple[int, int, int]:
    """
    Count liveness states in a status map.

    Returns:
        Tuple of (online, offline, checking). Unrecognised values count
        towards none of them.
    """
    online = offline = checking = 0
    for status in (status_map or {}).values():
        if status == ToolStatus.ONLINE:
            online += 1
        elif status == ToolStatus.OFFLINE:
            offline += 1
        elif status == ToolStatus.CHECKING:
            checking += 1
    return online, offline, checking


def rank_sources(source_stats: Mapping[str, int], limit: int = TOP_SOURCES_LIMIT) -> list[SourceCount]:
    """
    Rank sources by tool count.

    ``source_stats`` is built in first-seen order and the sort is stable,
    so sources with equal counts keep the order they first appeared in.
    """
    ranked = sorted(source_stats.items(), key=lambda item: item[1], reverse=True)
    return [SourceCount(source=source, count=count) for source, count in ranked[:limit]]


def aggregate(
    tools: Any,
    status_map: Optional[Mapping[str, Any]] = None,
    favorites: Optional[Iterable[str]] = None
) -> StatisticsBundle:
    """
    Compute the statistics bundle for a tool collection.

    Args:
        tools: Tool collection; non-list input counts as empty
        status_map: Tool id -> liveness status from the status probe
        favorites: Favorite tool ids (stale ids still count)

    Returns:
        StatisticsBundle
    """
    collection = coerce_tools(tools)
    total_tools = len(collection)

    total_votes = sum(tool.votes for tool in collection)
    total_comments = sum(tool.comments for tool in collection)

    source_stats: dict[str, int] = {}
    for tool in collection:
        source_stats[tool.source] = source_stats.get(tool.source, 0) + 1

    avg_votes = total_votes // total_tools if total_tools > 0 else 0

    online, offline, checking = count_statuses(status_map)

    bundle = StatisticsBundle(
        total_tools=total_tools,
        total_votes=total_votes,
        total_comments=total_comments,
        avg_votes=avg_votes,
        source_stats=source_stats,
        top_sources=rank_sources(source_stats),
        trending_tools=select_trending(collection, avg_votes),
        categories=categorize_tools(collection),
        online_tools=online,
        offline_tools=offline,
        checking_tools=checking,
        favorite_count=len(set(favorites or ())),
    )

    logger.debug(
        f"Aggregated {total_tools} tools from {len(source_stats)} sources "
        f"(avg votes {avg_votes})"
    )
    return bundle


def category_shares(bundle: StatisticsBundle) -> dict[str, float]:
    """Percentage of the collection in each category (0.0 when empty)."""
    shares = {}
    for label in CATEGORY_LABELS:
        size = len(bundle.categories.get(label, []))
        shares[label] = (size / bundle.total_tools) * 100 if bundle.total_tools else 0.0
    return shares
