"""View model builders for the web interface."""

from .result_builder import (
    build_legend,
    build_rows,
    build_search_status,
    build_span_details,
    build_time_markers,
    build_trace_info,
    prepare_view
)

__all__ = [
    "build_legend",
    "build_rows",
    "build_search_status",
    "build_span_details",
    "build_time_markers",
    "build_trace_info",
    "prepare_view",
]
