"""Tests for similar-tool recommendations."""
from toolboard.services.categorizer import categorize_tools
from toolboard.services.recommender import find_bucket, recommend


class TestRecommend:
    """Tests for recommend()."""

    def test_same_category_similar_votes(self, sample_tools):
        """Test a tool gets same-category tools within half its votes."""
        categories = categorize_tools(sample_tools)
        assert [t.id for t in recommend("1", categories)] == ["5"]
        assert [t.id for t in recommend("5", categories)] == ["1"]

    def test_never_includes_target(self, sample_tools):
        """Test the target tool is never recommended to itself."""
        categories = categorize_tools(sample_tools)
        for tool in sample_tools:
            assert tool.id not in [t.id for t in recommend(tool.id, categories)]

    def test_unknown_id(self, sample_tools):
        """Test an unknown tool id yields no recommendations."""
        assert recommend("missing", categorize_tools(sample_tools)) == []

    def test_zero_vote_target(self, make_tool):
        """Test a zero-vote target gets nothing, even from zero-vote peers."""
        tools = [
            make_tool("a", "Code A", votes=0),
            make_tool("b", "Code B", votes=0),
            make_tool("c", "Code C", votes=1),
        ]
        assert recommend("a", categorize_tools(tools)) == []

    def test_threshold_is_strict(self, make_tool):
        """Test a difference of exactly half the votes is excluded."""
        tools = [
            make_tool("a", "Code A", votes=100),
            make_tool("b", "Code B", votes=150),
            make_tool("c", "Code C", votes=149),
            make_tool("d", "Code D", votes=51),
        ]
        assert [t.id for t in recommend("a", categorize_tools(tools))] == ["c", "d"]

    def test_limited_to_three_in_bucket_order(self, make_tool):
        """Test at most three results, in bucket order, unsorted."""
        tools = [
            make_tool("t", "Code T", votes=100),
            make_tool("a", "Code A", votes=90),
            make_tool("b", "Code B", votes=110),
            make_tool("c", "Code C", votes=100),
            make_tool("d", "Code D", votes=101),
        ]
        assert [t.id for t in recommend("t", categorize_tools(tools))] == ["a", "b", "c"]

    def test_other_categories_ignored(self, make_tool):
        """Test tools from other categories are never recommended."""
        tools = [
            make_tool("a", "Code A", votes=100),
            make_tool("b", "Blog B", votes=100),
        ]
        assert recommend("a", categorize_tools(tools)) == []


def test_find_bucket(sample_tools):
    """Test locating the bucket that holds a tool."""
    label, tool = find_bucket("4", categorize_tools(sample_tools))

    assert label == "Data & Analytics"
    assert tool.title == "ChartGenie"
    assert find_bucket("missing", categorize_tools(sample_tools)) is None
