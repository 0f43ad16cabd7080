"""
Exceptions raised while loading and querying traces.
"""


class TraceVisualizerError(Exception):
    """Base class for trace visualizer errors."""


class ParseError(TraceVisualizerError):
    """Raw trace content is not valid JSON."""


class EmptyTraceError(TraceVisualizerError):
    """The trace data contained no usable spans."""

    def __init__(self, message: str = "No spans found in the trace data"):
        super().__init__(message)


class SpanNotFoundError(TraceVisualizerError, KeyError):
    """A span id was requested that is not part of the loaded trace."""

    def __init__(self, span_id: str):
        self.span_id = span_id
        super().__init__(f"Span '{span_id}' not found")

    def __str__(self) -> str:
        return self.args[0]
