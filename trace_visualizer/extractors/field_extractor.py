"""
Field extraction for flat span records (Elasticsearch/OpenSearch style exports).
"""

import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..core.types import DEFAULT_SPAN_KIND, SPAN_KINDS, STATUS_UNSET

ATTRIBUTE_PREFIXES = ('span.attributes.', 'resource.attributes.')

# Token checks run in this order, first match wins
SPAN_KIND_TOKENS = (
    ('SERVER', 'server'),
    ('CLIENT', 'client'),
    ('PRODUCER', 'producer'),
    ('CONSUMER', 'consumer'),
    ('INTERNAL', 'internal'),
)


class FieldExtractor:
    """Extracts normalized values from loosely structured span records."""

    @staticmethod
    def first_present(record: Dict, *keys: str) -> Any:
        """
        Return the value of the first key holding a truthy value.

        Args:
            record: Raw span record
            keys: Candidate key spellings in priority order

        Returns:
            The first truthy value, or None
        """
        for key in keys:
            value = record.get(key)
            if value:
                return value
        return None

    @staticmethod
    def parse_time(value: Any) -> float:
        """
        Parse a timestamp into epoch milliseconds.

        Numbers are taken as epoch milliseconds already. Strings are read as
        ISO-8601; a timestamp without an offset is interpreted as UTC.

        Returns:
            Epoch milliseconds, 0 when missing or unparseable
        """
        if not value or isinstance(value, bool):
            return 0
        if isinstance(value, (int, float)):
            return value
        if not isinstance(value, str):
            return 0

        text = value.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return 0
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return round(parsed.timestamp() * 1000, 3)

    @staticmethod
    def parse_number(value: Any) -> Optional[float]:
        """Read a finite number from a JSON number or numeric string, else None."""
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            try:
                value = int(value)
            except ValueError:
                try:
                    value = float(value)
                except ValueError:
                    return None
        if isinstance(value, (int, float)) and math.isfinite(value):
            return value
        return None

    @staticmethod
    def extract_prefixed_attributes(record: Dict) -> Dict[str, Any]:
        """Collect flattened attribute keys, keeping their prefix."""
        return {
            key: value
            for key, value in record.items()
            if isinstance(key, str) and key.startswith(ATTRIBUTE_PREFIXES)
        }

    @staticmethod
    def extract_status_code(record: Dict) -> Any:
        """Read the status code from a nested 'status' object or a flat 'status.code' key."""
        status = record.get('status')
        if isinstance(status, dict) and status.get('code'):
            return status['code']
        return record.get('status.code') or STATUS_UNSET

    @staticmethod
    def parse_span_kind(kind: Any) -> str:
        """
        Normalize a span kind given as a string token or an OTLP enum number.

        Args:
            kind: e.g. 'SPAN_KIND_SERVER', 'client', 2

        Returns:
            One of SPAN_KINDS, 'internal' when unrecognized
        """
        if isinstance(kind, str):
            upper = kind.upper()
            for token, normalized in SPAN_KIND_TOKENS:
                if token in upper:
                    return normalized
            return DEFAULT_SPAN_KIND
        if isinstance(kind, float) and kind.is_integer():
            kind = int(kind)
        if isinstance(kind, int) and not isinstance(kind, bool):
            if 0 <= kind < len(SPAN_KINDS):
                return SPAN_KINDS[kind]
        return DEFAULT_SPAN_KIND

    @staticmethod
    def optional_id(value: Any) -> Optional[str]:
        """Empty identifiers are treated as absent."""
        if value is None or value == '':
            return None
        return str(value)
