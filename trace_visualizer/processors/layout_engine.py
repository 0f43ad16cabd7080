"""
Timeline geometry for span bars.
"""

from ..core.types import BarLayout, Span, TraceBounds, VisualizerConfig

# Bars wider than this draw their duration label inside the bar
LABEL_INSIDE_MIN_PX = 80


def timeline_width(container_width: float, config: VisualizerConfig) -> float:
    """Pixels available for the time axis once the name column and padding are reserved."""
    return max(0, container_width - config.name_column_width - config.timeline_padding)


def compute_layout(
    span: Span,
    bounds: TraceBounds,
    container_width: float,
    config: VisualizerConfig = None
) -> BarLayout:
    """
    Compute the horizontal offset and width of a span's bar.

    Args:
        span: Span to lay out
        bounds: Bounds of the trace the span belongs to
        container_width: Total width in pixels of the waterfall container
        config: VisualizerConfig with column width, padding and minimum bar width

    Returns:
        BarLayout with offset_px and width_px
    """
    config = config or VisualizerConfig()
    width = timeline_width(container_width, config)

    offset_px = (span.start_time - bounds.start) / bounds.duration * width
    width_px = max(
        config.min_bar_width,
        (span.end_time - span.start_time) / bounds.duration * width
    )

    return BarLayout(
        offset_px=offset_px,
        width_px=width_px,
        label_inside=width_px > LABEL_INSIDE_MIN_PX
    )
