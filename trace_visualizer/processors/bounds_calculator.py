"""
Trace time bounds calculation.
"""

from typing import Sequence

from ..core.errors import EmptyTraceError
from ..core.types import MIN_TRACE_DURATION_MS, Span, TraceBounds


def calculate_bounds(spans: Sequence[Span]) -> TraceBounds:
    """
    Calculate the global start, end and duration of a trace.

    Args:
        spans: Non-empty sequence of spans

    Returns:
        TraceBounds in epoch milliseconds. A zero (or negative) duration is
        replaced by MIN_TRACE_DURATION_MS so layout division stays defined.

    Raises:
        EmptyTraceError: If spans is empty
    """
    if not spans:
        raise EmptyTraceError()

    start = min(span.start_time for span in spans)
    end = max(span.end_time for span in spans)
    duration = end - start
    if duration <= 0:
        duration = MIN_TRACE_DURATION_MS

    return TraceBounds(start=start, end=end, duration=duration)
