"""
Substring search over spans with cyclic result navigation.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.types import Span

SEARCH_EMPTY = 'empty'
SEARCH_NO_MATCH = 'no_match'
SEARCH_HAS_MATCH = 'has_match'


@dataclass(frozen=True)
class SearchState:
    """Snapshot of the search overlay."""
    query: str = ''
    results: Tuple[str, ...] = ()
    current_index: int = -1

    @property
    def status(self) -> str:
        if not self.query:
            return SEARCH_EMPTY
        if not self.results:
            return SEARCH_NO_MATCH
        return SEARCH_HAS_MATCH

    @property
    def current_span_id(self) -> Optional[str]:
        if 0 <= self.current_index < len(self.results):
            return self.results[self.current_index]
        return None

    def is_match(self, span_id: str) -> bool:
        return span_id in self.results

    def is_current(self, span_id: str) -> bool:
        return self.current_span_id == span_id

    def to_dict(self) -> Dict:
        return {
            'query': self.query,
            'results': list(self.results),
            'current_index': self.current_index,
            'current_span_id': self.current_span_id,
            'status': self.status,
        }


def span_matches(span: Span, query: str) -> bool:
    """
    Check a span against an already lower-cased query.

    Looks at name, service name, span id, then attribute keys and values.
    """
    if query in span.name.lower():
        return True
    if query in span.service_name.lower():
        return True
    if query in span.span_id.lower():
        return True
    for key, value in span.attributes.items():
        if query in str(key).lower():
            return True
        if query in str(value).lower():
            return True
    return False


class SearchNavigator:
    """Runs searches and moves a cursor through the matches."""

    def __init__(self, spans: Sequence[Span] = (), index: Dict[str, Span] = None,
                 visibility=None):
        """
        Args:
            spans: Flat span list in original order
            index: span_id -> Span lookup used to order results
            visibility: VisibilityController whose ancestors get expanded
                        for the current match
        """
        self.spans = list(spans)
        self.index = index or {}
        self.visibility = visibility
        self.state = SearchState()

    def search(self, query: str) -> SearchState:
        """
        Search all spans for a case-insensitive substring.

        Results are ordered by span start time, ties keep the original span
        order. When there is a match, the first one becomes current and its
        ancestors are expanded.
        """
        normalized = (query or '').strip().lower()
        if not normalized:
            self.state = SearchState()
            return self.state

        results: List[str] = [
            span.span_id for span in self.spans if span_matches(span, normalized)
        ]
        results.sort(key=lambda span_id: self.index[span_id].start_time)

        current_index = 0 if results else -1
        self.state = SearchState(
            query=normalized,
            results=tuple(results),
            current_index=current_index
        )
        self._reveal_current()
        return self.state

    def navigate(self, direction: int) -> SearchState:
        """
        Move to the next (+1) or previous (-1) match, wrapping around.

        Raises:
            ValueError: If direction is not 1 or -1
        """
        if direction not in (1, -1):
            raise ValueError(f"direction must be 1 or -1, got {direction!r}")
        if not self.state.results:
            return self.state

        current_index = (self.state.current_index + direction) % len(self.state.results)
        self.state = SearchState(
            query=self.state.query,
            results=self.state.results,
            current_index=current_index
        )
        self._reveal_current()
        return self.state

    def clear(self) -> SearchState:
        self.state = SearchState()
        return self.state

    def _reveal_current(self) -> None:
        current = self.state.current_span_id
        if current is not None and self.visibility is not None:
            self.visibility.expand_path(current)
