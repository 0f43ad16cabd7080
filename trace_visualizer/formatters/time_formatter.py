"""
Time formatting utilities for human-readable output.
"""

from datetime import datetime, timezone


def format_duration(ms: float) -> str:
    """
    Format a duration in milliseconds to a human-readable string.

    Args:
        ms: Duration in milliseconds

    Returns:
        Formatted string (e.g., "< 1μs", "250μs", "123.45ms", "2.34s", "1m 30.5s")
    """
    if ms < 0.001:
        return "< 1μs"
    elif ms < 1:
        return f"{ms * 1000:.0f}μs"
    elif ms < 1000:
        return f"{ms:.2f}ms"
    elif ms < 60000:
        return f"{ms/1000:.2f}s"
    else:
        minutes = int(ms // 60000)
        seconds = (ms % 60000) / 1000
        return f"{minutes}m {seconds:.1f}s"


def format_span_duration(duration_ns: float) -> str:
    """Format a span duration, which is stored in nanoseconds."""
    return format_duration(duration_ns / 1_000_000)


def format_timestamp(ms: float) -> str:
    """
    Format epoch milliseconds as a UTC timestamp.

    Returns:
        String like "2024-01-15 10:30:00.123", or "Invalid Date" when the
        value is outside the supported calendar range
    """
    try:
        moment = datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return "Invalid Date"
    return moment.strftime('%Y-%m-%d %H:%M:%S.') + f"{moment.microsecond // 1000:03d}"
