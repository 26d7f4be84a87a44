"""Trending tool selection."""
from typing import Sequence

from toolboard.schemas.tool import Tool

TRENDING_LIMIT = 5


def select_trending(
    tools: Sequence[Tool],
    average_votes: int,
    limit: int = TRENDING_LIMIT
) -> list[Tool]:
    """
    Pick the most voted tools that beat the average.

    Only tools with votes strictly above ``average_votes`` qualify, so a
    collection where every tool sits at the average has no trending set.

    Args:
        tools: Tool collection
        average_votes: Dataset average (see aggregator)
        limit: Maximum number of tools to return

    Returns:
        Up to ``limit`` tools, most votes first, ties in input order
    """
    qualifying = [tool for tool in tools if tool.votes > average_votes]
    qualifying.sort(key=lambda t: t.votes, reverse=True)
    return qualifying[:limit]
