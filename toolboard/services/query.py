"""Filtering and sorting of the tool listing."""
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Sequence

from toolboard.schemas.analytics import StatisticsBundle
from toolboard.schemas.tool import Tool, coerce_tools
from toolboard.services.categorizer import categorize_tools

ALL = "all"


class SortOrder(str, Enum):
    """Vote ordering of the listing."""
    DESC = "desc"
    ASC = "asc"


def matches_search(tool: Tool, search_term: str) -> bool:
    """Case-insensitive title match; tools without a title never match."""
    if not tool.title:
        return False
    return (search_term or "").lower() in tool.title.lower()


def query_tools(
    tools: Any,
    search_term: str = "",
    source_filter: str = ALL,
    category_filter: str = ALL,
    categories: Optional[Mapping[str, Sequence[Tool]]] = None,
    sort_order: str = SortOrder.DESC,
) -> list[Tool]:
    """
    Filter and sort a tool collection.

    The search, source and category predicates are ANDed. Only the
    title is searched. An unknown category label matches nothing.

    Args:
        tools: Tool collection; non-list input counts as empty
        search_term: Substring to look for in titles
        source_filter: Exact source name, or "all"
        category_filter: Category label, or "all"
        categories: Category buckets; computed from ``tools`` when omitted
        sort_order: "desc" or "asc" on votes; anything else sorts desc

    Returns:
        Matching tools sorted by votes, ties in input order
    """
    collection = coerce_tools(tools)

    category_ids = None
    if category_filter != ALL:
        if categories is None:
            categories = categorize_tools(collection)
        category_ids = {tool.id for tool in categories.get(category_filter, [])}

    filtered = [
        tool for tool in collection
        if matches_search(tool, search_term)
        and (source_filter == ALL or tool.source == source_filter)
        and (category_ids is None or tool.id in category_ids)
    ]

    # sorted() is stable in both directions
    descending = sort_order != SortOrder.ASC
    return sorted(filtered, key=lambda t: t.votes, reverse=descending)


def available_sources(bundle: StatisticsBundle) -> list[str]:
    """Source filter options in first-seen order."""
    return list(bundle.source_stats)
