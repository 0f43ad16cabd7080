"""
Span normalizer for heterogeneous trace export formats.
"""

from typing import Any, Dict, List, Optional

from ..core.types import DEFAULT_SERVICE_NAME, DEFAULT_SPAN_NAME, Span
from ..extractors import FieldExtractor, OtlpExtractor


class SpanNormalizer:
    """Detects the shape of parsed trace data and converts it to canonical spans."""

    def __init__(self, field_extractor=None, otlp_extractor=None):
        """
        Initialize with extractors.

        Args:
            field_extractor: FieldExtractor instance for flat records
            otlp_extractor: OtlpExtractor instance for resourceSpans payloads
        """
        self.field_extractor = field_extractor or FieldExtractor()
        self.otlp_extractor = otlp_extractor or OtlpExtractor()

    def normalize(self, data: Any) -> List[Span]:
        """
        Convert parsed trace JSON into a flat list of spans.

        Supported shapes, checked in this order:
            1. a list of span records (OpenSearch/Elasticsearch hits)
            2. {"spans": [...]}
            3. {"data": [...]}
            4. {"resourceSpans": [...]} (OTLP)

        Any other shape yields an empty list. Records without a span id are
        dropped.

        Args:
            data: Parsed JSON value

        Returns:
            List of Span objects with empty children
        """
        if isinstance(data, list):
            records = data
        elif isinstance(data, dict) and isinstance(data.get('spans'), list):
            records = data['spans']
        elif isinstance(data, dict) and isinstance(data.get('data'), list):
            records = data['data']
        elif isinstance(data, dict) and isinstance(data.get('resourceSpans'), list):
            return self.normalize_otlp(data['resourceSpans'])
        else:
            return []

        spans = []
        for record in records:
            span = self.normalize_record(record)
            if span is not None:
                spans.append(span)
        return spans

    def normalize_record(self, record: Any) -> Optional[Span]:
        """
        Normalize one flat span record.

        Args:
            record: Raw record, optionally wrapped in a search engine '_source'

        Returns:
            Span, or None when the record has no span id
        """
        if not isinstance(record, dict):
            return None
        source = record.get('_source')
        if not isinstance(source, dict) or not source:
            source = record

        fields = self.field_extractor
        span_id = fields.first_present(source, 'spanId', 'span_id')
        if not span_id:
            return None

        start_time = fields.parse_time(fields.first_present(source, 'startTime', 'start_time'))
        end_time = fields.parse_time(fields.first_present(source, 'endTime', 'end_time'))

        # Explicit durations are already nanoseconds; computed ones convert from ms
        duration = fields.parse_number(fields.first_present(source, 'durationInNanos', 'duration'))
        if not duration:
            duration = (end_time - start_time) * 1_000_000

        service_name = fields.first_present(
            source, 'serviceName', 'service_name', 'resource.attributes.service@name'
        )

        return Span(
            span_id=str(span_id),
            parent_span_id=fields.optional_id(
                fields.first_present(source, 'parentSpanId', 'parent_span_id')
            ),
            trace_id=fields.optional_id(fields.first_present(source, 'traceId', 'trace_id')),
            name=str(source.get('name') or DEFAULT_SPAN_NAME),
            service_name=str(service_name or DEFAULT_SERVICE_NAME),
            kind=fields.parse_span_kind(source.get('kind')),
            start_time=start_time,
            end_time=end_time,
            duration=duration,
            status_code=fields.extract_status_code(source),
            attributes=fields.extract_prefixed_attributes(source),
            events=source.get('events') or [],
        )

    def normalize_otlp(self, resource_spans: List[Dict]) -> List[Span]:
        """
        Normalize an OTLP resourceSpans list.

        Timestamps are Unix nanoseconds; start/end are converted to milliseconds
        while duration keeps the raw nanosecond difference.

        Args:
            resource_spans: The 'resourceSpans' list

        Returns:
            List of Span objects
        """
        otlp = self.otlp_extractor
        spans = []

        for resource_span in resource_spans:
            if not isinstance(resource_span, dict):
                continue
            service_name = otlp.extract_service_name(resource_span.get('resource'))
            scope_spans = (resource_span.get('scopeSpans')
                           or resource_span.get('instrumentationLibrarySpans')
                           or [])

            for scope_span in scope_spans:
                if not isinstance(scope_span, dict):
                    continue
                for raw in scope_span.get('spans') or []:
                    if not isinstance(raw, dict) or not raw.get('spanId'):
                        continue

                    start_nanos = otlp.parse_nanos(raw.get('startTimeUnixNano'))
                    end_nanos = otlp.parse_nanos(raw.get('endTimeUnixNano'))
                    status = raw.get('status')

                    spans.append(Span(
                        span_id=str(raw['spanId']),
                        parent_span_id=self.field_extractor.optional_id(raw.get('parentSpanId')),
                        trace_id=self.field_extractor.optional_id(raw.get('traceId')),
                        name=str(raw.get('name') or DEFAULT_SPAN_NAME),
                        service_name=str(service_name),
                        kind=self.field_extractor.parse_span_kind(raw.get('kind')),
                        start_time=otlp.nanos_to_millis(start_nanos),
                        end_time=otlp.nanos_to_millis(end_nanos),
                        duration=end_nanos - start_nanos,
                        status_code=(status.get('code') or 0) if isinstance(status, dict) else 0,
                        attributes=otlp.extract_attributes(raw.get('attributes')),
                        events=raw.get('events') or [],
                    ))

        return spans


def normalize_spans(data: Any) -> List[Span]:
    """Convenience wrapper around SpanNormalizer.normalize()."""
    return SpanNormalizer().normalize(data)
