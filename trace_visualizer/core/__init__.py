"""Core components for trace visualization."""

from .visualizer import TraceVisualizer
from .errors import EmptyTraceError, ParseError, SpanNotFoundError, TraceVisualizerError
from .types import BarLayout, LoadResult, Span, TraceBounds, VisualizerConfig

__all__ = [
    "TraceVisualizer",
    "BarLayout",
    "LoadResult",
    "Span",
    "TraceBounds",
    "VisualizerConfig",
    "EmptyTraceError",
    "ParseError",
    "SpanNotFoundError",
    "TraceVisualizerError",
]
