"""
Text helpers for span details.
"""

from ..extractors.field_extractor import ATTRIBUTE_PREFIXES

STATUS_TEXT = {
    0: 'Unset',
    1: 'OK',
    2: 'Error',
}


def status_text(code) -> str:
    """Human-readable status for a span status code."""
    if isinstance(code, int) and not isinstance(code, bool) and code in STATUS_TEXT:
        return STATUS_TEXT[code]
    return f"Unknown ({code})"


def truncate(text: str, length: int) -> str:
    if len(text) <= length:
        return text
    return text[:length] + '...'


def display_attribute_key(key: str) -> str:
    """Strip the flattened export prefix from an attribute key."""
    for prefix in ATTRIBUTE_PREFIXES:
        key = key.replace(prefix, '', 1)
    return key
