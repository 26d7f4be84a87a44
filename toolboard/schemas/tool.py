"""Tool record schemas."""
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class ToolStatus(str, Enum):
    """Liveness of a tool's URL as reported by the status probe."""
    ONLINE = "online"
    OFFLINE = "offline"
    CHECKING = "checking"


class Tool(BaseModel):
    """One catalogued AI product with its engagement metrics."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    source: str = ""
    tags: list[str] = Field(default_factory=list)
    votes: int = 0
    comments: int = 0
    created_at: Optional[str] = Field(None, alias="createdAt")
    scraped_at: Optional[str] = Field(None, alias="scrapedAt")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("title", "description", "url", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        """Scalars become text; containers are dropped rather than rejected."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (list, tuple, set, Mapping)):
            return None
        return str(v)

    @field_validator("votes", "comments", mode="before")
    @classmethod
    def coerce_count(cls, v: Any) -> int:
        """Missing, malformed and negative counts all count as zero."""
        if v is None or isinstance(v, bool):
            return 0
        try:
            count = int(float(v))
        except (TypeError, ValueError, OverflowError):
            return 0
        return max(count, 0)

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, v: Any) -> list:
        if not isinstance(v, (list, tuple)):
            return []
        return [str(tag) for tag in v if tag is not None]

    @field_validator("source", mode="before")
    @classmethod
    def coerce_source(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("created_at", "scraped_at", mode="before")
    @classmethod
    def coerce_timestamp(cls, v: Any) -> Optional[str]:
        # Timestamps are opaque; keep whatever the feed sent as text
        return None if v is None else str(v)


def coerce_tools(raw: Any) -> list[Tool]:
    """
    Turn an untrusted feed payload into Tool records.

    Anything that is not a list yields an empty collection. Entries that
    are not mappings, or that cannot be validated (no id), are skipped.

    Args:
        raw: Decoded JSON array of tool objects (or anything else)

    Returns:
        List of Tool records in input order
    """
    if isinstance(raw, Tool):
        return [raw]
    if not isinstance(raw, (list, tuple)):
        return []

    tools = []
    skipped = 0
    for item in raw:
        if isinstance(item, Tool):
            tools.append(item)
            continue
        if not isinstance(item, Mapping):
            skipped += 1
            continue
        try:
            tools.append(Tool.model_validate(dict(item)))
        except ValidationError as e:
            skipped += 1
            logger.debug(f"Skipping malformed tool record: {e.error_count()} errors")

    if skipped:
        logger.warning(f"Skipped {skipped} malformed tool records out of {len(raw)}")

    return tools
