"""Tests for listing filters and sorting."""
from toolboard.schemas.tool import Tool
from toolboard.services.aggregator import aggregate
from toolboard.services.categorizer import categorize_tools
from toolboard.services.query import SortOrder, available_sources, query_tools


def _ids(tools):
    return [tool.id for tool in tools]


class TestSearch:
    """Tests for the title search."""

    def test_no_filters_sorts_desc(self, sample_tools):
        """Test defaults return every titled tool, most votes first."""
        assert _ids(query_tools(sample_tools)) == ["1", "5", "2", "3", "4", "6"]

    def test_case_insensitive_title_match(self, sample_tools):
        """Test search matches titles regardless of case."""
        assert _ids(query_tools(sample_tools, search_term="CODE")) == ["1", "5"]

    def test_description_not_searched(self, sample_tools):
        """Test terms only present in descriptions do not match."""
        assert query_tools(sample_tools, search_term="github") == []

    def test_missing_title_excluded(self, make_tool):
        """Test tools without a title never appear in results."""
        tools = [Tool(id="x", description="code"), make_tool("y", "Code Y")]
        assert _ids(query_tools(tools)) == ["y"]


class TestFilters:
    """Tests for source and category predicates."""

    def test_source_exact_match(self, sample_tools):
        """Test source filtering uses exact equality."""
        assert _ids(query_tools(sample_tools, source_filter="Reddit")) == ["4", "6"]
        assert query_tools(sample_tools, source_filter="reddit") == []

    def test_category_filter(self, sample_tools):
        """Test category filtering against supplied buckets."""
        categories = categorize_tools(sample_tools)
        result = query_tools(
            sample_tools,
            category_filter="Coding & Development",
            categories=categories,
        )
        assert _ids(result) == ["1", "5"]

    def test_category_buckets_computed_when_missing(self, sample_tools):
        """Test buckets are derived on demand."""
        assert _ids(query_tools(sample_tools, category_filter="Design & Creative")) == ["3"]

    def test_unknown_category_matches_nothing(self, sample_tools):
        """Test an unknown category label yields no tools."""
        assert query_tools(sample_tools, category_filter="Games") == []

    def test_predicates_are_anded(self, make_tool):
        """Test search, source and category must all hold."""
        tools = [
            make_tool("1", "Xray", votes=5, source="A"),
            make_tool("2", "Box", votes=4, source="A"),
            make_tool("3", "Xenon", votes=3, source="B"),
            make_tool("4", "max", votes=2, source="A"),
        ]
        result = query_tools(tools, search_term="x", source_filter="A", category_filter="all")
        assert _ids(result) == ["1", "2", "4"]

        result = query_tools(tools, search_term="xe", source_filter="A")
        assert result == []

    def test_non_list_input(self):
        """Test a missing collection yields no results."""
        assert query_tools(None) == []


class TestSorting:
    """Tests for vote ordering."""

    def test_ascending(self, sample_tools):
        """Test ascending vote order."""
        result = query_tools(sample_tools, sort_order=SortOrder.ASC)
        assert _ids(result) == ["6", "4", "3", "2", "5", "1"]

    def test_plain_string_order(self, sample_tools):
        """Test sort order given as a plain string."""
        assert _ids(query_tools(sample_tools, sort_order="asc"))[0] == "6"

    def test_stable_in_both_directions(self, make_tool):
        """Test equal votes keep input order ascending and descending."""
        tools = [
            make_tool("a", votes=10),
            make_tool("b", votes=20),
            make_tool("c", votes=10),
            make_tool("d", votes=20),
        ]
        assert _ids(query_tools(tools, sort_order="desc")) == ["b", "d", "a", "c"]
        assert _ids(query_tools(tools, sort_order="asc")) == ["a", "c", "b", "d"]


def test_available_sources(sample_tools):
    """Test source filter options in first-seen order."""
    assert available_sources(aggregate(sample_tools)) == ["Product Hunt", "Hacker News", "Reddit"]
