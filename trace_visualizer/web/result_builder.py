"""
Result builder for web interface output.
"""

from collections import Counter
from typing import Any, Dict, List, Optional

from ..formatters import (
    display_attribute_key,
    format_duration,
    format_span_duration,
    format_timestamp,
    status_text,
    truncate
)

TRACE_ID_DISPLAY_LENGTH = 16


def build_rows(visualizer, container_width: float) -> List[Dict[str, Any]]:
    """
    Flatten the span tree into waterfall rows in depth-first order.

    Hidden rows are included with 'hidden' set so the renderer can keep
    collapsed subtrees in place.

    Args:
        visualizer: TraceVisualizer with a loaded trace
        container_width: Width in pixels of the waterfall container

    Returns:
        List of row dictionaries
    """
    search = visualizer.search_state
    rows = []

    stack = [(root, 0) for root in reversed(visualizer.get_tree())]
    while stack:
        span, depth = stack.pop()
        layout = visualizer.compute_layout(span.span_id, container_width)

        rows.append({
            'span_id': span.span_id,
            'parent_span_id': span.parent_span_id,
            'depth': depth,
            'name': span.name,
            'service_name': span.service_name,
            'color': visualizer.get_service_color(span.service_name),
            'kind': span.kind,
            'kind_badge': span.kind[0].upper() if span.kind != 'internal' else None,
            'hidden': visualizer.is_hidden(span.span_id),
            'has_children': bool(span.children),
            'collapsed': visualizer.is_collapsed(span.span_id),
            'has_error': span.is_error,
            'selected': visualizer.selected_span_id == span.span_id,
            'search_match': search.is_match(span.span_id),
            'search_current': search.is_current(span.span_id),
            'offset_px': layout.offset_px,
            'width_px': layout.width_px,
            'label_inside': layout.label_inside,
            'duration_label': format_span_duration(span.duration),
        })

        for child in reversed(span.children):
            stack.append((child, depth + 1))

    return rows


def build_time_markers(visualizer) -> List[str]:
    """Evenly spaced labels from the trace start to its end."""
    count = visualizer.config.time_marker_count
    duration = visualizer.get_bounds().duration
    return [format_duration(duration / (count - 1) * i) for i in range(count)]


def build_trace_info(visualizer) -> Dict[str, Any]:
    roots = visualizer.get_tree()
    bounds = visualizer.get_bounds()
    trace_id = (roots[0].trace_id if roots else None) or 'Unknown'

    return {
        'trace_id': trace_id,
        'trace_id_display': truncate(trace_id, TRACE_ID_DISPLAY_LENGTH),
        'duration_ms': bounds.duration,
        'duration_formatted': format_duration(bounds.duration),
        'span_count': len(visualizer.spans),
        'service_count': len(visualizer.service_colors),
        'start_time': bounds.start,
        'start_time_formatted': format_timestamp(bounds.start),
    }


def build_legend(visualizer) -> List[Dict[str, Any]]:
    """Services with their color and span count, busiest first."""
    counts = Counter(span.service_name for span in visualizer.spans)
    return [
        {
            'service': service,
            'color': visualizer.get_service_color(service),
            'count': count,
        }
        for service, count in sorted(counts.items(), key=lambda item: -item[1])
    ]


def build_span_details(visualizer, span_id: str) -> Dict[str, Any]:
    """
    Detail panel content for one span.

    Raises:
        SpanNotFoundError: If the span id is unknown
    """
    span = visualizer.require_span(span_id)
    bounds = visualizer.get_bounds()

    attributes = [
        {
            'key': key,
            'display_key': display_attribute_key(key),
            'value': span.attributes[key],
        }
        for key in sorted(span.attributes)
    ]

    return {
        'span': span.to_dict(),
        'basic_info': {
            'name': span.name,
            'service_name': span.service_name,
            'span_id': span.span_id,
            'parent_span_id': span.parent_span_id or 'None (root)',
            'kind': span.kind,
            'status': status_text(span.status_code),
            'status_ok': not span.is_error,
        },
        'timing': {
            'duration': format_span_duration(span.duration),
            'start_time': format_timestamp(span.start_time),
            'end_time': format_timestamp(span.end_time),
            'offset_from_start': format_duration(span.start_time - bounds.start),
        },
        'attributes': attributes,
    }


def build_search_status(visualizer) -> Dict[str, Any]:
    """Search state plus the counter text shown next to the search box."""
    state = visualizer.search_state
    if not state.query:
        count_text = ''
    elif state.results:
        count_text = f"{state.current_index + 1}/{len(state.results)}"
    else:
        count_text = '0 results'

    result = state.to_dict()
    result['count_text'] = count_text
    result['can_navigate'] = bool(state.results)
    return result


def prepare_view(visualizer, container_width: float) -> Dict[str, Any]:
    """
    Convert the visualizer state to a structured format for JSON output.

    Args:
        visualizer: TraceVisualizer instance with a loaded trace
        container_width: Width in pixels of the waterfall container

    Returns:
        Dictionary with everything a renderer needs to draw the waterfall
    """
    selected: Optional[Dict[str, Any]] = None
    if visualizer.selected_span_id is not None:
        selected = build_span_details(visualizer, visualizer.selected_span_id)

    return {
        'trace_info': build_trace_info(visualizer),
        'legend': build_legend(visualizer),
        'time_markers': build_time_markers(visualizer),
        'rows': build_rows(visualizer, container_width),
        'search': build_search_status(visualizer),
        'selected_span': selected,
        'bounds': visualizer.get_bounds().to_dict(),
    }
