"""Similar-tool recommendations within a category."""
from collections.abc import Mapping
from typing import Optional, Sequence

from toolboard.schemas.tool import Tool

RECOMMENDATION_LIMIT = 3

# Candidates must be within this fraction of the target's votes
VOTE_SIMILARITY_RATIO = 0.5


def find_bucket(
    tool_id: str,
    categories: Mapping[str, Sequence[Tool]]
) -> Optional[tuple[str, Tool]]:
    """Return (category, tool) for the first bucket holding ``tool_id``."""
    for label, bucket in categories.items():
        for tool in bucket:
            if tool.id == tool_id:
                return label, tool
    return None


def recommend(
    tool_id: str,
    categories: Mapping[str, Sequence[Tool]],
    limit: int = RECOMMENDATION_LIMIT
) -> list[Tool]:
    """
    Recommend tools similar to ``tool_id``.

    Similar means same category and a vote count within half of the
    target's votes (strictly). A target with zero votes has a zero
    threshold and therefore never gets recommendations.

    Args:
        tool_id: Target tool id
        categories: Category buckets from the aggregator
        limit: Maximum number of recommendations

    Returns:
        Up to ``limit`` tools in bucket order; empty for unknown ids
    """
    found = find_bucket(tool_id, categories or {})
    if found is None:
        return []

    label, target = found
    threshold = target.votes * VOTE_SIMILARITY_RATIO

    similar = [
        tool for tool in categories[label]
        if tool.id != tool_id and abs(tool.votes - target.votes) < threshold
    ]
    return similar[:limit]
