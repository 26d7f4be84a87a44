"""Tools feed client."""
import logging
from typing import Any

import httpx

from toolboard.schemas.tool import Tool, coerce_tools

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """The tools feed could not be fetched or decoded."""


def extract_tools(payload: Any) -> list[Any]:
    """
    Locate the tools array in a feed payload.

    Accepted shapes, in order: ``{"data": {"tools": [...]}}``, a bare
    list, and ``{"tools": [...]}``. Anything else yields an empty list.
    """
    if isinstance(payload, dict):
        data = payload.get("data")
        if isinstance(data, dict) and isinstance(data.get("tools"), list):
            return data["tools"]
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("tools"), list):
        return payload["tools"]
    return []


async def fetch_tools(
    url: str,
    timeout: float = 15.0,
    transport: httpx.AsyncBaseTransport | None = None
) -> list[Tool]:
    """
    Fetch and decode the tools feed.

    Args:
        url: Feed URL
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests)

    Returns:
        List of Tool records

    Raises:
        FeedError: On non-2xx responses, transport failures or bad JSON
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url, headers={"Accept": "application/json"})
    except httpx.HTTPError as e:
        logger.error(f"Tools feed request failed: {e}")
        raise FeedError(f"Failed to fetch tools: {e}") from e

    if not response.is_success:
        raise FeedError(
            f"Failed to fetch tools: {response.status_code} {response.reason_phrase}"
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise FeedError("Failed to fetch tools: response is not valid JSON") from e

    tools = coerce_tools(extract_tools(payload))
    logger.info(f"Tools feed: loaded {len(tools)} tools from {url}")
    return tools
