"""In-process catalog state shared by the API routes.

Holds the raw inputs only: the tool collection, the liveness status map
and the comparison selection. Derived views are recomputed from these
on every request.
"""
import asyncio
import contextlib
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Coroutine, Optional

from toolboard.schemas.tool import Tool, ToolStatus
from toolboard.services.feed import FeedError
from toolboard.services.selection import toggle_comparison
from toolboard.services.status_probe import initial_status_map

logger = logging.getLogger(__name__)


class CatalogState:
    """Current tool collection and the selections that go with it."""

    def __init__(self, tools: Optional[list[Tool]] = None):
        self.tools: list[Tool] = list(tools or [])
        self.statuses: dict[str, ToolStatus] = initial_status_map(self.tools)
        self.comparison: frozenset[str] = frozenset()
        self.loaded_at: Optional[datetime] = datetime.now(timezone.utc) if tools is not None else None
        self.last_error: Optional[str] = None
        self.status_task: Optional[asyncio.Task] = None

    @property
    def is_loaded(self) -> bool:
        return self.loaded_at is not None

    def get_tool(self, tool_id: str) -> Optional[Tool]:
        for tool in self.tools:
            if tool.id == tool_id:
                return tool
        return None

    def replace_tools(self, tools: list[Tool]) -> None:
        """Swap in a new collection; every status goes back to checking."""
        # Results of a check still running belong to the old collection
        self.cancel_status_check()
        self.tools = list(tools)
        self.statuses = initial_status_map(self.tools)
        self.loaded_at = datetime.now(timezone.utc)
        self.last_error = None

    def update_statuses(self, statuses: dict[str, ToolStatus]) -> None:
        """Apply probe results; entries for unknown ids are dropped."""
        known = {tool.id for tool in self.tools}
        self.statuses = {
            **self.statuses,
            **{tool_id: status for tool_id, status in statuses.items() if tool_id in known},
        }

    def start_status_check(self, check: Coroutine) -> asyncio.Task:
        """Run a status check in the background, replacing any running one."""
        self.cancel_status_check()
        self.status_task = asyncio.create_task(check)
        self.status_task.add_done_callback(_log_status_check_failure)
        return self.status_task

    def cancel_status_check(self) -> None:
        if self.status_task and not self.status_task.done():
            self.status_task.cancel()

    async def stop_status_check(self) -> None:
        """Cancel the running status check and wait for it to finish."""
        task = self.status_task
        self.status_task = None
        if task is None or task.done():
            # A finished check already reported its outcome
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    def toggle_comparison(self, tool_id: str) -> frozenset[str]:
        self.comparison = toggle_comparison(self.comparison, tool_id)
        return self.comparison

    def clear_comparison(self) -> None:
        self.comparison = frozenset()

    async def refresh(self, fetch: Callable[[], Awaitable[list[Tool]]]) -> list[Tool]:
        """
        Reload the collection from the feed.

        On failure the previous collection stays in place and the error
        message is kept for the readiness check.

        Raises:
            FeedError: If the feed could not be fetched
        """
        try:
            tools = await fetch()
        except FeedError as e:
            self.last_error = str(e)
            logger.error(f"Catalog refresh failed: {e}")
            raise

        self.replace_tools(tools)
        logger.info(f"Catalog refreshed: {len(tools)} tools")
        return self.tools


def _log_status_check_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error(f"Status check failed: {error}", exc_info=error)


catalog = CatalogState()


def get_catalog() -> CatalogState:
    """FastAPI dependency returning the process-wide catalog."""
    return catalog
