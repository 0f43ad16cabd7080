"""
Type definitions for trace visualization.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Span kinds in OTLP numeric order
SPAN_KINDS = ('unspecified', 'internal', 'server', 'client', 'producer', 'consumer')
DEFAULT_SPAN_KIND = 'internal'

DEFAULT_SPAN_NAME = 'Unknown'
DEFAULT_SERVICE_NAME = 'Unknown Service'

# Status codes
STATUS_UNSET = 0
STATUS_OK = 1
STATUS_ERROR = 2

# Used when every span starts and ends at the same instant
MIN_TRACE_DURATION_MS = 1e-6

DEFAULT_COLOR_PALETTE = (
    '#3b82f6', '#0ea5e9', '#06b6d4', '#14b8a6', '#22c55e',
    '#60a5fa', '#38bdf8', '#22d3ee', '#2dd4bf', '#4ade80',
    '#1d4ed8', '#0284c7', '#0891b2', '#0d9488', '#16a34a',
    '#2563eb', '#0369a1', '#0e7490', '#0f766e', '#15803d',
)


@dataclass(eq=False)
class Span:
    """
    Canonical span record.

    start_time and end_time are epoch milliseconds, duration is nanoseconds.
    """
    span_id: str
    parent_span_id: Optional[str] = None
    trace_id: Optional[str] = None
    name: str = DEFAULT_SPAN_NAME
    service_name: str = DEFAULT_SERVICE_NAME
    kind: str = DEFAULT_SPAN_KIND
    start_time: float = 0
    end_time: float = 0
    duration: float = 0
    status_code: Any = STATUS_UNSET
    attributes: Dict[str, Any] = field(default_factory=dict)
    events: List[Any] = field(default_factory=list)
    children: List['Span'] = field(default_factory=list, repr=False)

    @property
    def is_error(self) -> bool:
        """Anything other than unset or OK is treated as an error."""
        return self.status_code not in (STATUS_UNSET, STATUS_OK)

    @property
    def duration_ms(self) -> float:
        return self.duration / 1_000_000

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization (children excluded)."""
        return {
            'span_id': self.span_id,
            'parent_span_id': self.parent_span_id,
            'trace_id': self.trace_id,
            'name': self.name,
            'service_name': self.service_name,
            'kind': self.kind,
            'start_time': self.start_time,
            'end_time': self.end_time,
            'duration': self.duration,
            'status_code': self.status_code,
            'attributes': dict(self.attributes),
            'events': list(self.events),
            'child_count': len(self.children),
        }


@dataclass(frozen=True)
class TraceBounds:
    """Global time bounds of a trace, in epoch milliseconds."""
    start: float
    end: float
    duration: float

    def to_dict(self) -> Dict[str, float]:
        return {'start': self.start, 'end': self.end, 'duration': self.duration}


@dataclass(frozen=True)
class BarLayout:
    """Pixel geometry of one span bar on the timeline."""
    offset_px: float
    width_px: float
    label_inside: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'offset_px': self.offset_px,
            'width_px': self.width_px,
            'label_inside': self.label_inside,
        }


@dataclass
class SpanTree:
    """Result of hierarchy construction."""
    roots: List[Span]
    index: Dict[str, Span]
    # span_id -> parent span_id as attached in the tree (None for roots)
    parents: Dict[str, Optional[str]]


@dataclass(frozen=True)
class LoadResult:
    """Summary returned by a successful load."""
    span_count: int
    root_count: int
    service_count: int
    trace_id: Optional[str]
    bounds: TraceBounds

    def to_dict(self) -> Dict[str, Any]:
        return {
            'span_count': self.span_count,
            'root_count': self.root_count,
            'service_count': self.service_count,
            'trace_id': self.trace_id,
            'bounds': self.bounds.to_dict(),
        }


class VisualizerConfig:
    """Configuration for trace visualization."""

    def __init__(
        self,
        name_column_width: int = 350,
        timeline_padding: int = 76,
        min_bar_width: int = 3,
        color_palette=DEFAULT_COLOR_PALETTE,
        time_marker_count: int = 6
    ):
        """
        Initialize trace visualization configuration.

        Args:
            name_column_width: Width in pixels reserved for the span name column
                               on the left of the timeline. Default: 350

            timeline_padding: Horizontal padding in pixels around the timeline
                              (16px left, 60px right for duration labels).
                              Default: 76

            min_bar_width: Minimum bar width in pixels so that near-zero duration
                           spans stay visible and clickable. Default: 3

            color_palette: Sequence of colors cycled over the sorted service names.

            time_marker_count: Number of evenly spaced time axis labels. Default: 6
        """
        if not color_palette:
            raise ValueError("color_palette must contain at least one color")
        if time_marker_count < 2:
            raise ValueError("time_marker_count must be at least 2")

        self.name_column_width = name_column_width
        self.timeline_padding = timeline_padding
        self.min_bar_width = min_bar_width
        self.color_palette = tuple(color_palette)
        self.time_marker_count = time_marker_count
