"""
Value extraction from OTLP (resourceSpans) structures.
"""

from typing import Any, Dict, List, Optional

from ..core.types import DEFAULT_SERVICE_NAME

# Checked in this order; the first present, non-empty value wins
ATTRIBUTE_VALUE_TYPES = ('stringValue', 'intValue', 'boolValue', 'doubleValue')


class OtlpExtractor:
    """Extracts service names, attributes and timestamps from OTLP spans."""

    @staticmethod
    def extract_service_name(resource: Optional[Dict]) -> str:
        """
        Extract service name from a resource block.

        Args:
            resource: OTLP resource dictionary with an 'attributes' list

        Returns:
            Service name or 'Unknown Service' if not found
        """
        if not isinstance(resource, dict):
            return DEFAULT_SERVICE_NAME

        for attr in resource.get('attributes') or []:
            if isinstance(attr, dict) and attr.get('key') == 'service.name':
                value = attr.get('value') or {}
                return value.get('stringValue') or DEFAULT_SERVICE_NAME
        return DEFAULT_SERVICE_NAME

    @staticmethod
    def unwrap_value(value: Optional[Dict]) -> Any:
        """Unwrap an OTLP AnyValue into a plain scalar."""
        if not isinstance(value, dict):
            return ''
        for value_type in ATTRIBUTE_VALUE_TYPES:
            unwrapped = value.get(value_type)
            if unwrapped is not None and unwrapped != '':
                return unwrapped
        return ''

    @staticmethod
    def extract_attributes(attributes: Optional[List[Dict]]) -> Dict[str, Any]:
        """
        Convert an OTLP key/value attribute list into a flat dictionary.

        Args:
            attributes: List of {'key': ..., 'value': {...}} dictionaries

        Returns:
            Dictionary mapping attribute key -> scalar value
        """
        result = {}
        for attr in attributes or []:
            if not isinstance(attr, dict) or 'key' not in attr:
                continue
            result[attr['key']] = OtlpExtractor.unwrap_value(attr.get('value'))
        return result

    @staticmethod
    def parse_nanos(value: Any) -> int:
        """
        Parse a Unix nanosecond timestamp, which OTLP JSON may encode as a string.

        Returns:
            Integer nanoseconds, 0 when missing or unparseable
        """
        if value is None or value == '' or isinstance(value, bool):
            return 0
        try:
            return int(value)
        except (TypeError, ValueError):
            try:
                return int(float(value))
            except (TypeError, ValueError):
                return 0

    @staticmethod
    def nanos_to_millis(nanos: int) -> float:
        """Convert nanoseconds to milliseconds."""
        return nanos / 1_000_000
