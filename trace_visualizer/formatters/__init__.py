"""Formatting helpers for display output."""

from .time_formatter import format_duration, format_span_duration, format_timestamp
from .span_formatter import display_attribute_key, status_text, truncate

__all__ = [
    "format_duration",
    "format_span_duration",
    "format_timestamp",
    "display_attribute_key",
    "status_text",
    "truncate",
]
