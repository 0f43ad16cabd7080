"""
Trace Visualizer - OpenTelemetry Trace Waterfall Model
"""

__version__ = "1.0.0"

from .core.visualizer import TraceVisualizer
from .core.errors import EmptyTraceError, ParseError, SpanNotFoundError, TraceVisualizerError
from .core.types import BarLayout, LoadResult, Span, TraceBounds, VisualizerConfig

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
