"""Adjacency-list graph of weighted, directed edges.

`RouteGraph` maps each source `Node` to the list of its outgoing `Edge`s in
insertion order. A node that never had an outgoing edge has no entry at all;
traversal code treats the missing entry as a dead end.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from tripgraph.model.elements import Edge, Node
from tripgraph.utils.checks import reject_if_none


class RouteGraph:
    """A directed multigraph stored as ``{source: [edge, ...]}``.

    The graph only grows: edges are appended, never removed. Parallel edges
    between the same pair of nodes are kept as separate entries. Destinations
    do not need an adjacency entry of their own.

    The class does no locking; build the graph before issuing queries from
    several threads.
    """

    def __init__(self) -> None:
        self._adj: Dict[Node, List[Edge]] = {}

    def add_edge(self, node: Node, edge: Edge) -> None:
        """Append ``edge`` to the outgoing edges of ``node``.

        Args:
            node: Source node of the edge.
            edge: Edge to append.

        Raises:
            InvalidArgumentError: If ``node`` or ``edge`` is None.
        """
        reject_if_none(node, "node")
        reject_if_none(edge, "edge")
        self._adj.setdefault(node, []).append(edge)

    def successors(self, node: Node) -> Optional[List[Edge]]:
        """Return the outgoing edges of ``node`` in insertion order.

        Returns None (not an empty list) when ``node`` has no outgoing edges.
        The returned list is the graph's own storage and must not be modified.
        """
        return self._adj.get(node)

    def nodes(self) -> List[Node]:
        """Return every node seen as a source or a destination, in discovery order."""
        seen: Dict[Node, None] = {}
        for src, edges in self._adj.items():
            seen.setdefault(src, None)
            for edge in edges:
                seen.setdefault(edge.node, None)
        return list(seen)

    def edges(self) -> Iterator[Tuple[Node, Edge]]:
        """Yield ``(source, edge)`` pairs, grouped by source in insertion order."""
        for src, edges in self._adj.items():
            for edge in edges:
                yield src, edge

    def number_of_nodes(self) -> int:
        return len(self.nodes())

    def number_of_edges(self) -> int:
        return sum(len(edges) for edges in self._adj.values())

    def __contains__(self, node: object) -> bool:
        if node in self._adj:
            return True
        return any(edge.node == node for _, edge in self.edges())

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly ``{"nodes": [...], "edges": [...]}`` representation.

        Node labels are converted with ``str``.
        """
        return {
            "nodes": [str(node) for node in self.nodes()],
            "edges": [
                {
                    "source": str(src),
                    "target": str(edge.node),
                    "distance": edge.distance,
                }
                for src, edge in self.edges()
            ],
        }

    def __repr__(self) -> str:
        return (
            f"RouteGraph(nodes={self.number_of_nodes()}, "
            f"edges={self.number_of_edges()})"
        )
