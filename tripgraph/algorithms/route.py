"""Distance of an explicit route."""

from __future__ import annotations

from typing import Optional, Sequence

from tripgraph.graph.route_graph import RouteGraph
from tripgraph.model.elements import Node
from tripgraph.types.base import NO_ROUTE, Distance


def route_distance(
    graph: RouteGraph, nodes: Optional[Sequence[Optional[Node]]]
) -> Distance:
    """Return the total distance of travelling through ``nodes`` in order.

    Each consecutive pair must be joined by a direct edge. When a pair has
    several parallel edges, the first one inserted is used, not the cheapest.

    Args:
        graph: Graph to walk.
        nodes: Route as a sequence of at least two nodes.

    Returns:
        The summed distance, or ``NO_ROUTE`` if ``nodes`` is None, shorter than
        two, contains None, or any hop has no direct edge.
    """
    if nodes is None or len(nodes) < 2 or any(node is None for node in nodes):
        return NO_ROUTE

    distance = 0
    current = nodes[0]
    for next_node in nodes[1:]:
        edges = graph.successors(current)
        if edges is None:
            return NO_ROUTE

        for edge in edges:
            if edge.node == next_node:
                distance += edge.distance
                break
        else:
            return NO_ROUTE

        current = next_node

    return distance
