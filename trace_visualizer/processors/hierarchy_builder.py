"""
Hierarchy builder for trace spans.
"""

from typing import Dict, List, Optional

from ..core.types import Span, SpanTree


class HierarchyBuilder:
    """Builds tree structure from flat list of spans."""

    def build(self, spans: List[Span]) -> SpanTree:
        """
        Build the parent/child forest from a flat list of spans.

        A span is a root when its parent id is missing, does not resolve in
        the index, or attaching it would close a cycle. Duplicate span ids
        overwrite earlier entries in the index (last one wins).

        Args:
            spans: Spans in their original order

        Returns:
            SpanTree with sorted roots, the id index and effective parent ids
        """
        # First pass: index spans by id
        index: Dict[str, Span] = {}
        for span in spans:
            span.children = []
            index[span.span_id] = span

        # Second pass: link children to parents
        roots: List[Span] = []
        parents: Dict[str, Optional[str]] = {}
        for span in spans:
            parent_id = span.parent_span_id
            if (parent_id and parent_id in index
                    and not self._closes_cycle(span.span_id, parent_id, parents)):
                index[parent_id].children.append(span)
                parents[span.span_id] = parent_id
            else:
                roots.append(span)
                parents[span.span_id] = None

        self.sort_by_start_time(roots)
        return SpanTree(roots=roots, index=index, parents=parents)

    @staticmethod
    def _closes_cycle(span_id: str, parent_id: str, parents: Dict[str, Optional[str]]) -> bool:
        """Check whether span_id already appears among the attached ancestors of parent_id."""
        current = parent_id
        seen = set()
        while current is not None and current not in seen:
            if current == span_id:
                return True
            seen.add(current)
            current = parents.get(current)
        return False

    @staticmethod
    def sort_by_start_time(roots: List[Span]) -> None:
        """
        Stable-sort the root list and every children list by start time.

        Uses an explicit stack so arbitrarily deep traces are handled.

        Args:
            roots: Root spans (modified in-place)
        """
        roots.sort(key=lambda s: s.start_time)
        stack = list(roots)
        while stack:
            span = stack.pop()
            span.children.sort(key=lambda s: s.start_time)
            stack.extend(span.children)


def build_span_tree(spans: List[Span]) -> SpanTree:
    """Convenience wrapper around HierarchyBuilder.build()."""
    return HierarchyBuilder().build(spans)
