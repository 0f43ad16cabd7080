"""Data extraction utilities for raw trace records."""

from .field_extractor import FieldExtractor
from .otlp_extractor import OtlpExtractor

__all__ = ["FieldExtractor", "OtlpExtractor"]
