"""CycleDetector — acyclicity guard for Yields relations.

Adding ``start -> end`` closes a loop exactly when ``start`` is already
reachable from ``end`` along existing edges. The detector rebuilds a
NetworkX DiGraph from the supplied edge snapshot and walks it breadth-first
from ``end``.

INVARIANT: Traversal tracks visited nodes, so it terminates on any finite
edge set, including one that already contains a cycle.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import TypeAlias

import networkx as nx

from edugraph.domain.models import EdgeRef

_Graph: TypeAlias = nx.DiGraph


def build_graph(edges: Iterable[EdgeRef]) -> _Graph:
    """Build the adjacency view ``start -> {end, ...}`` from *edges*."""
    g: _Graph = nx.DiGraph()
    g.add_edges_from((edge.start, edge.end) for edge in edges)
    return g


class CycleDetector:
    """Decides whether a candidate Yields edge would introduce a cycle."""

    @staticmethod
    def reachable_from(g: _Graph, source: str, *, stop_at: str | None = None) -> set[str]:
        """Return every node reachable from *source* following edge direction.

        *source* itself is included. When *stop_at* is reached the walk ends
        early; the returned set then contains it.
        """
        visited: set[str] = {source}
        if source not in g:
            return visited

        queue: deque[str] = deque([source])
        while queue:
            node = queue.popleft()
            for successor in g.successors(node):
                if successor in visited:
                    continue
                visited.add(successor)
                if successor == stop_at:
                    return visited
                queue.append(successor)
        return visited

    def would_create_cycle(self, edges: Iterable[EdgeRef], start: str, end: str) -> bool:
        """Return True if adding ``start -> end`` to *edges* creates a cycle."""
        g = build_graph(edges)
        if start not in g or end not in g:
            return False
        return start in self.reachable_from(g, end, stop_at=start)
