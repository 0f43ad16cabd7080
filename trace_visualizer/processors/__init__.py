"""Processors turning raw trace data into the span model."""

from .file_processor import TraceFileProcessor
from .normalizer import SpanNormalizer, normalize_spans
from .bounds_calculator import calculate_bounds
from .hierarchy_builder import HierarchyBuilder, build_span_tree
from .color_assigner import assign_service_colors
from .layout_engine import compute_layout, timeline_width

__all__ = [
    "TraceFileProcessor",
    "SpanNormalizer",
    "normalize_spans",
    "calculate_bounds",
    "HierarchyBuilder",
    "build_span_tree",
    "assign_service_colors",
    "compute_layout",
    "timeline_width",
]
