"""Favorites and comparison selections.

Both selections are owned by the caller. Every operation takes the
current set and returns a new frozenset; nothing here persists them.
"""
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Sequence

from toolboard.schemas.analytics import ComparisonRow
from toolboard.schemas.tool import Tool, ToolStatus

COMPARISON_LIMIT = 5


def toggle_favorite(favorites: Iterable[str], tool_id: str) -> frozenset[str]:
    """Add ``tool_id`` to favorites, or remove it if already there."""
    current = set(favorites)
    if tool_id in current:
        current.discard(tool_id)
    else:
        current.add(tool_id)
    return frozenset(current)


def toggle_comparison(
    selection: Iterable[str],
    tool_id: str,
    limit: int = COMPARISON_LIMIT
) -> frozenset[str]:
    """
    Add or remove ``tool_id`` from the comparison selection.

    Adding to a full selection is a no-op, not an error.
    """
    current = set(selection)
    if tool_id in current:
        current.discard(tool_id)
    elif len(current) < limit:
        current.add(tool_id)
    return frozenset(current)


def select_tools(tools: Sequence[Tool], ids: Iterable[str]) -> list[Tool]:
    """Tools whose id is in ``ids``, in collection order."""
    wanted = set(ids)
    return [tool for tool in tools if tool.id in wanted]


def comparison_rows(
    tools: Sequence[Tool],
    selection: Iterable[str],
    status_map: Optional[Mapping[str, Any]] = None
) -> list[ComparisonRow]:
    """Build the side-by-side comparison for the selected tools."""
    statuses = status_map or {}
    rows = []
    for tool in select_tools(tools, selection):
        status = statuses.get(tool.id, ToolStatus.CHECKING)
        if status not in (ToolStatus.ONLINE, ToolStatus.OFFLINE):
            status = ToolStatus.CHECKING
        rows.append(ComparisonRow(
            id=tool.id,
            title=tool.title,
            votes=tool.votes,
            comments=tool.comments,
            source=tool.source,
            status=status,
            description=tool.description,
        ))
    return rows
