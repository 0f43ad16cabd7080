"""
Main trace visualizer engine.
"""

from typing import Any, Dict, List, Optional

from ..core.errors import EmptyTraceError, SpanNotFoundError
from ..core.types import BarLayout, LoadResult, Span, SpanTree, TraceBounds, VisualizerConfig
from ..processors import (
    TraceFileProcessor,
    SpanNormalizer,
    HierarchyBuilder,
    calculate_bounds,
    assign_service_colors,
    compute_layout
)
from ..state import SearchNavigator, SearchState, VisibilityController


class TraceVisualizer:
    """
    Owns the loaded trace and all derived view state.

    A load replaces everything: spans, index, tree, colors, selection,
    collapse set and search state. Renderers only read through the query
    methods.
    """

    def __init__(self, config: Optional[VisualizerConfig] = None):
        """
        Initialize the TraceVisualizer.

        Args:
            config: VisualizerConfig with layout and palette settings
        """
        self.config = config or VisualizerConfig()

        self.file_processor = TraceFileProcessor()
        self.normalizer = SpanNormalizer()
        self.hierarchy_builder = HierarchyBuilder()

        self.reset()

    def reset(self) -> None:
        """Discard the loaded trace and all overlay state."""
        self.spans: List[Span] = []
        self.tree = SpanTree(roots=[], index={}, parents={})
        self.bounds: Optional[TraceBounds] = None
        self.service_colors: Dict[str, str] = {}
        self.selected_span_id: Optional[str] = None
        self.visibility = VisibilityController(self.tree)
        self.search_navigator = SearchNavigator(visibility=self.visibility)

    @property
    def has_trace(self) -> bool:
        return bool(self.spans)

    # Loading

    def load(self, data: Any) -> LoadResult:
        """
        Load parsed trace JSON, replacing any previously loaded trace.

        Args:
            data: Parsed JSON value in any supported export shape

        Returns:
            LoadResult summary

        Raises:
            EmptyTraceError: If no spans could be extracted. The engine is
                             left reset.
        """
        self.reset()

        spans = self.normalizer.normalize(data)
        if not spans:
            raise EmptyTraceError()

        bounds = calculate_bounds(spans)
        tree = self.hierarchy_builder.build(spans)
        service_colors = assign_service_colors(spans, self.config.color_palette)

        # Commit only once everything has been built
        visibility = VisibilityController(tree)
        self.spans = spans
        self.tree = tree
        self.bounds = bounds
        self.service_colors = service_colors
        self.visibility = visibility
        self.search_navigator = SearchNavigator(spans, tree.index, visibility)

        return LoadResult(
            span_count=len(spans),
            root_count=len(tree.roots),
            service_count=len(service_colors),
            trace_id=tree.roots[0].trace_id if tree.roots else None,
            bounds=bounds
        )

    def load_text(self, text: str) -> LoadResult:
        """
        Parse trace JSON text and load it.

        Raises:
            ParseError: If the text is not valid JSON (engine state untouched)
            EmptyTraceError: If no spans could be extracted
        """
        return self.load(self.file_processor.process_text(text))

    def load_file(self, file_path: str) -> LoadResult:
        """
        Read a trace JSON file and load it.

        Raises:
            ParseError: If the file is not valid JSON (engine state untouched)
            EmptyTraceError: If no spans could be extracted
        """
        data = self.file_processor.process_file(file_path)
        result = self.load(data)
        print(f"Loaded {result.span_count} spans from {result.service_count} services "
              f"({result.root_count} root spans)")
        return result

    # Queries

    def get_span(self, span_id: str) -> Optional[Span]:
        return self.tree.index.get(span_id)

    def get_spans(self) -> List[Span]:
        return list(self.spans)

    def get_tree(self) -> List[Span]:
        """Root spans sorted by start time."""
        return list(self.tree.roots)

    def get_bounds(self) -> Optional[TraceBounds]:
        return self.bounds

    def get_service_color(self, service_name: str) -> Optional[str]:
        return self.service_colors.get(service_name)

    def require_span(self, span_id: str) -> Span:
        span = self.get_span(span_id)
        if span is None:
            raise SpanNotFoundError(span_id)
        return span

    def compute_layout(self, span_id: str, container_width: float) -> BarLayout:
        """
        Compute the bar geometry of a span for the given container width.

        Raises:
            SpanNotFoundError: If the span id is unknown
        """
        span = self.require_span(span_id)
        return compute_layout(span, self.bounds, container_width, self.config)

    # Collapse state

    def is_hidden(self, span_id: str) -> bool:
        return self.visibility.is_hidden(span_id)

    def is_collapsed(self, span_id: str) -> bool:
        return self.visibility.is_collapsed(span_id)

    def toggle_collapse(self, span_id: str) -> bool:
        return self.visibility.toggle(span_id)

    def collapse_all(self) -> None:
        self.visibility.collapse_all()

    def expand_all(self) -> None:
        self.visibility.expand_all()

    # Selection

    def select_span(self, span_id: str) -> Span:
        """
        Mark a span as selected.

        Raises:
            SpanNotFoundError: If the span id is unknown
        """
        span = self.require_span(span_id)
        self.selected_span_id = span_id
        return span

    # Search

    @property
    def search_state(self) -> SearchState:
        return self.search_navigator.state

    def search(self, query: str) -> SearchState:
        return self.search_navigator.search(query)

    def navigate_search(self, direction: int) -> SearchState:
        return self.search_navigator.navigate(direction)

    def clear_search(self) -> SearchState:
        return self.search_navigator.clear()
