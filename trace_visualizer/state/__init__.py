"""Overlay state (collapse and search) kept outside the span tree."""

from .search import SearchNavigator, SearchState, span_matches
from .visibility import VisibilityController

__all__ = ["SearchNavigator", "SearchState", "VisibilityController", "span_matches"]
