"""Shortest accumulated distance by breadth-first relaxation.

The search expands nodes in first-discovery order. Every edge that reaches a
node relaxes its recorded distance, but a node is queued for expansion only
once, when it is first discovered. An improvement found after a node was
expanded is recorded and never propagated to that node's successors, so on
some cyclic graphs the result can exceed the true minimum. Results are exact
on graphs where every node's best distance is known by the time it is
expanded.

The start node is not marked as discovered up front: it is queued a second
time when an edge first leads back to it, and is then expanded with the
recorded length of that cycle.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Set

from tripgraph.graph.route_graph import RouteGraph
from tripgraph.model.elements import Node
from tripgraph.types.base import DISCONNECTED, Distance
from tripgraph.utils.checks import reject_if_none


def bfs_distances(graph: RouteGraph, start: Node) -> Dict[Node, Distance]:
    """Return the best distance recorded for every node reached from ``start``.

    ``start`` appears in the result only if a cycle leads back to it; its own
    zero distance is never recorded.

    Args:
        graph: Graph to search.
        start: Source node.

    Returns:
        Mapping of reached node to recorded distance.

    Raises:
        InvalidArgumentError: If ``start`` is None.
    """
    reject_if_none(start, "start")

    costs: Dict[Node, Distance] = {}
    discovered: Set[Node] = set()
    queue: Deque[Node] = deque([start])

    while queue:
        parent = queue.popleft()
        edges = graph.successors(parent)
        if edges is None:
            continue

        for edge in edges:
            neighbor = edge.node
            if neighbor not in discovered:
                discovered.add(neighbor)
                queue.append(neighbor)

            # Read per edge: a self-loop may have just updated the parent
            candidate = costs.get(parent, 0) + edge.distance
            previous = costs.get(neighbor)
            if previous is None or candidate < previous:
                costs[neighbor] = candidate

    return costs


def shortest_distance(graph: RouteGraph, start: Node, end: Node) -> Distance:
    """Return the shortest distance recorded from ``start`` to ``end``.

    Args:
        graph: Graph to search.
        start: Source node.
        end: Destination node. When equal to ``start``, the shortest cycle
            found through ``start`` is returned.

    Returns:
        The recorded distance, or ``DISCONNECTED`` if ``end`` was never reached.

    Raises:
        InvalidArgumentError: If a node is None.
    """
    reject_if_none(start, "start")
    reject_if_none(end, "end")
    return bfs_distances(graph, start).get(end, DISCONNECTED)
