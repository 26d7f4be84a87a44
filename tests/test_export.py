"""Tests for the export document."""
import json
from datetime import datetime, timezone

from toolboard.services.aggregator import aggregate
from toolboard.services.export import build_export, export_filename, format_timestamp
from toolboard.services.query import query_tools

NOW = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


def test_document_contents(sample_tools):
    """Test the export bundles tools, favorites, statistics and time."""
    bundle = aggregate(sample_tools, favorites={"5", "1"})
    filtered = query_tools(sample_tools, search_term="code", categories=bundle.categories)

    document = build_export(filtered, {"5", "1"}, bundle, now=NOW)

    assert [t.id for t in document.tools] == ["1", "5"]
    assert document.favorites == ["1", "5"]
    assert document.analytics == bundle
    assert document.export_date == "2024-05-01T12:30:00.000Z"


def test_serialized_keys(sample_tools):
    """Test the JSON form uses the feed's field names."""
    bundle = aggregate(sample_tools)
    document = build_export(sample_tools[:1], [], bundle, now=NOW)

    data = json.loads(document.model_dump_json(by_alias=True))
    assert set(data) == {"tools", "favorites", "analytics", "exportDate"}
    assert "createdAt" in data["tools"][0]


def test_refilter_reproduces_listing(sample_tools):
    """Test re-filtering exported tools gives the same id sequence."""
    bundle = aggregate(sample_tools)
    params = dict(search_term="o", source_filter="Product Hunt", category_filter="all")
    filtered = query_tools(sample_tools, categories=bundle.categories, **params)

    document = build_export(filtered, [], bundle, now=NOW)
    again = query_tools(document.tools, categories=bundle.categories, **params)

    assert [t.id for t in again] == [t.id for t in filtered]


def test_naive_timestamp_treated_as_utc():
    """Test naive datetimes are read as UTC."""
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"


def test_export_filename():
    assert export_filename() == "ai-tools-export.json"
