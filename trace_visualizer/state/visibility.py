"""
Collapse/expand state for the span tree.

Visibility is never stored on spans. A span is hidden exactly when one of its
strict ancestors is in the collapsed set, so any sequence of toggles leaves
the view consistent with the tree.
"""

from typing import Iterator, Optional, Set

from ..core.types import SpanTree


class VisibilityController:
    """Tracks collapsed span ids and answers visibility queries."""

    def __init__(self, tree: Optional[SpanTree] = None):
        self.tree = tree
        self.collapsed: Set[str] = set()

    def ancestors(self, span_id: str) -> Iterator[str]:
        """
        Yield the strict ancestor ids of a span, nearest first.

        The walk ends at a root or at a parent id that does not resolve to a
        span; a dangling reference simply means there are no further ancestors.
        """
        if self.tree is None:
            return
        seen = {span_id}
        current = self.tree.parents.get(span_id)
        while current is not None and current not in seen:
            if current not in self.tree.index:
                break
            yield current
            seen.add(current)
            current = self.tree.parents.get(current)

    def is_hidden(self, span_id: str) -> bool:
        """True when any strict ancestor of the span is collapsed."""
        if not self.collapsed:
            return False
        return any(ancestor in self.collapsed for ancestor in self.ancestors(span_id))

    def is_collapsed(self, span_id: str) -> bool:
        return span_id in self.collapsed

    def toggle(self, span_id: str) -> bool:
        """
        Flip the collapsed state of exactly one span.

        Returns:
            True if the span is collapsed after the call
        """
        if span_id in self.collapsed:
            self.collapsed.discard(span_id)
            return False
        self.collapsed.add(span_id)
        return True

    def collapse_all(self) -> None:
        """Collapse every span that has at least one child."""
        if self.tree is None:
            return
        for span in self.tree.index.values():
            if span.children:
                self.collapsed.add(span.span_id)

    def expand_all(self) -> None:
        self.collapsed.clear()

    def expand_path(self, span_id: str) -> None:
        """Expand every ancestor of a span so that the span becomes visible."""
        for ancestor in list(self.ancestors(span_id)):
            self.collapsed.discard(ancestor)
