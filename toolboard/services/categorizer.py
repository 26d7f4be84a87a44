"""Keyword-based tool categorization.

Categories are an ordered rule table: the first group whose keywords
appear in the lowercased title + description wins, anything else is
"Other". Matching is plain substring containment, so "ide" matches
"video" and "text" matches "context".
"""
from typing import Iterable

from toolboard.schemas.tool import Tool

OTHER = "Other"

# Evaluation order is significant
CATEGORY_RULES: list[tuple[str, tuple[str, ...]]] = [
    ("Coding & Development", ("code", "programming", "development", "ide", "github")),
    ("Writing & Content", ("writing", "content", "blog", "text")),
    ("Design & Creative", ("design", "creative", "image", "visual")),
    ("Data & Analytics", ("data", "analytics", "chart", "analysis")),
    ("Productivity", ("productivity", "task", "organize", "workflow")),
    ("Research & Learning", ("research", "learn", "education", "study")),
]

CATEGORY_LABELS: list[str] = [label for label, _ in CATEGORY_RULES] + [OTHER]


def categorize(tool: Tool) -> str:
    """Return the category label for a single tool."""
    text = f"{tool.title or ''} {tool.description or ''}".lower()

    for label, keywords in CATEGORY_RULES:
        if any(keyword in text for keyword in keywords):
            return label

    return OTHER


def categorize_tools(tools: Iterable[Tool]) -> dict[str, list[Tool]]:
    """
    Group tools into category buckets.

    Every label is present, empty categories as empty lists. Tools keep
    their input order inside each bucket.
    """
    categories: dict[str, list[Tool]] = {label: [] for label in CATEGORY_LABELS}
    for tool in tools:
        categories[categorize(tool)].append(tool)
    return categories
