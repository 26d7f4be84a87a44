"""URL liveness probing for tools."""
import asyncio
import logging
from typing import Sequence

import httpx

from toolboard.schemas.tool import Tool, ToolStatus

logger = logging.getLogger(__name__)


def initial_status_map(tools: Sequence[Tool]) -> dict[str, ToolStatus]:
    """Every tool starts out as being checked."""
    return {tool.id: ToolStatus.CHECKING for tool in tools}


class StatusProbe:
    """Checks whether a tool's URL answers."""

    def __init__(self, timeout: float = 5.0, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout
        self.transport = transport

    async def probe(self, url: str | None, client: httpx.AsyncClient | None = None) -> ToolStatus:
        """
        Probe a single URL.

        HEAD first, GET when the server refuses HEAD. Anything below 400
        is online; errors, timeouts and missing URLs are offline.
        """
        if not url:
            return ToolStatus.OFFLINE

        if client is None:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport, follow_redirects=True
            ) as own_client:
                return await self.probe(url, own_client)

        try:
            response = await client.head(url)
            if response.status_code == 405:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # Malformed URLs count as unreachable, not as a failed check
            logger.debug(f"Probe failed for {url}: {e}")
            return ToolStatus.OFFLINE

        return ToolStatus.ONLINE if response.status_code < 400 else ToolStatus.OFFLINE


async def check_statuses(
    tools: Sequence[Tool],
    probe: StatusProbe,
    concurrency: int = 10
) -> dict[str, ToolStatus]:
    """
    Probe every tool URL with bounded concurrency.

    Returns:
        Status map with an online/offline entry for every tool
    """
    semaphore = asyncio.Semaphore(concurrency)

    async with httpx.AsyncClient(
        timeout=probe.timeout, transport=probe.transport, follow_redirects=True
    ) as client:

        async def check(tool: Tool) -> tuple[str, ToolStatus]:
            async with semaphore:
                return tool.id, await probe.probe(tool.url, client)

        results = await asyncio.gather(*(check(tool) for tool in tools))

    statuses = dict(results)
    online = sum(1 for status in statuses.values() if status == ToolStatus.ONLINE)
    logger.info(f"Status check: {online}/{len(statuses)} tools online")
    return statuses
