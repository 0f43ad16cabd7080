"""
Unit tests for trace_visualizer.state.search module.
"""
import pytest
from trace_visualizer.core.types import Span
from trace_visualizer.processors.hierarchy_builder import build_span_tree
from trace_visualizer.processors.normalizer import normalize_spans
from trace_visualizer.state.search import SearchNavigator, SearchState, span_matches
from trace_visualizer.state.visibility import VisibilityController


@pytest.fixture
def navigator(nested_trace):
    spans = normalize_spans(nested_trace)
    tree = build_span_tree(spans)
    return SearchNavigator(spans, tree.index, VisibilityController(tree))


class TestSpanMatches:
    """Tests for the matching predicate."""

    def test_matches_fields(self):
        span = Span(span_id="abc123", name="GET /users", service_name="user-service",
                    attributes={"http.method": "POST", "retries": 3})
        assert span_matches(span, "get /")
        assert span_matches(span, "user-serv")
        assert span_matches(span, "c12")
        assert span_matches(span, "http.meth")
        assert span_matches(span, "post")
        assert span_matches(span, "3")
        assert not span_matches(span, "kafka")


class TestSearch:
    """Tests for search()."""

    def test_empty_query(self, navigator):
        state = navigator.search("   ")
        assert state == SearchState()
        assert state.status == "empty"
        assert state.current_index == -1

    def test_no_match(self, navigator):
        state = navigator.search("kafka")
        assert state.status == "no_match"
        assert state.results == ()
        assert state.current_index == -1

    def test_case_insensitive_and_trimmed(self, navigator):
        state = navigator.search("  SELECT ")
        assert state.query == "select"
        assert state.results == ("db-query",)
        assert state.current_index == 0
        assert state.status == "has_match"

    def test_results_ordered_by_start_time(self, navigator):
        # api-service spans appear as db-query (30) then cache-get (25) in input
        state = navigator.search("api-service")
        assert state.results == ("cache-get", "db-query")

    def test_ties_keep_input_order(self):
        spans = [Span(span_id=f"s{i}", name="same", start_time=5) for i in range(4)]
        tree = build_span_tree(spans)
        state = SearchNavigator(spans, tree.index).search("same")
        assert state.results == ("s0", "s1", "s2", "s3")

    def test_attribute_match(self, navigator):
        assert navigator.search("postgres").results == ("db-query",)

    def test_first_result_ancestors_are_expanded(self, navigator):
        navigator.visibility.collapse_all()
        state = navigator.search("select items")
        assert state.current_span_id == "db-query"
        assert not navigator.visibility.is_hidden("db-query")

    def test_new_query_resets_index(self, navigator):
        navigator.search("g")
        navigator.navigate(1)
        assert navigator.search("g").current_index == 0


class TestNavigate:
    """Tests for navigate() and clear()."""

    def test_noop_without_results(self, navigator):
        assert navigator.navigate(1) == SearchState()
        navigator.search("kafka")
        assert navigator.navigate(-1).current_index == -1

    def test_wraps_forward_and_backward(self, navigator):
        state = navigator.search("api-service")
        assert state.current_index == 0
        assert navigator.navigate(1).current_index == 1
        assert navigator.navigate(1).current_index == 0
        assert navigator.navigate(-1).current_index == 1

    def test_full_cycle_returns_to_start(self, navigator):
        state = navigator.search("e")
        count = len(state.results)
        assert count > 2
        navigator.navigate(1)
        start = navigator.state.current_index
        for _ in range(count):
            navigator.navigate(1)
        assert navigator.state.current_index == start

    def test_backward_inverts_forward(self, navigator):
        navigator.search("e")
        start = navigator.state.current_index
        navigator.navigate(1)
        navigator.navigate(-1)
        assert navigator.state.current_index == start

    def test_navigation_expands_new_match(self, navigator):
        navigator.search("api-service")
        navigator.visibility.collapse_all()
        state = navigator.navigate(1)
        assert state.current_span_id == "db-query"
        assert not navigator.visibility.is_hidden("db-query")

    def test_invalid_direction(self, navigator):
        navigator.search("e")
        with pytest.raises(ValueError):
            navigator.navigate(2)

    def test_clear_keeps_collapse_state(self, navigator):
        navigator.search("select")
        navigator.visibility.toggle("root")
        state = navigator.clear()
        assert state.status == "empty"
        assert state.results == ()
        assert navigator.visibility.collapsed == {"root"}


class TestSearchState:
    """Tests for SearchState helpers."""

    def test_current_and_match_flags(self):
        state = SearchState(query="x", results=("a", "b"), current_index=1)
        assert state.current_span_id == "b"
        assert state.is_match("a")
        assert state.is_current("b")
        assert not state.is_current("a")
        assert state.to_dict() == {
            "query": "x",
            "results": ["a", "b"],
            "current_index": 1,
            "current_span_id": "b",
            "status": "has_match",
        }
