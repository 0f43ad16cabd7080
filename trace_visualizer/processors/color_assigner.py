"""
Deterministic service color assignment.
"""

from typing import Dict, Iterable, Sequence

from ..core.types import DEFAULT_COLOR_PALETTE, Span


def assign_service_colors(
    spans: Iterable[Span],
    palette: Sequence[str] = DEFAULT_COLOR_PALETTE
) -> Dict[str, str]:
    """
    Map each distinct service name to a palette color.

    Services are sorted lexicographically and the palette is cycled by index,
    so the result depends only on the set of service names.

    Args:
        spans: Spans of the loaded trace
        palette: Colors to cycle through

    Returns:
        Dictionary mapping service name -> color
    """
    services = sorted({span.service_name for span in spans})
    return {
        service: palette[index % len(palette)]
        for index, service in enumerate(services)
    }
