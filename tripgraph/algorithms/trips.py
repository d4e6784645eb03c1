"""Trip counting by exhaustive depth-first enumeration.

A trip is a walk from a start node that lands on an end node; walks may revisit
nodes and parallel edges count as different trips. Both counters walk the graph
with an explicit stack, so large bounds are limited by memory rather than by
the interpreter recursion limit.

Notes:
    The start node itself (zero hops, zero distance) never counts as a trip,
    so ``start == end`` counts cycles back to the start.
"""

from __future__ import annotations

from typing import List, Tuple

from tripgraph.graph.route_graph import RouteGraph
from tripgraph.model.elements import Node
from tripgraph.types.base import Distance, TripMode
from tripgraph.utils.checks import reject_if_none, reject_if_not_positive


def count_trips_by_stops(
    graph: RouteGraph,
    start: Node,
    end: Node,
    stop_count: int,
    mode: TripMode = TripMode.MAXIMUM_STOPS,
) -> int:
    """Count trips from ``start`` to ``end`` bounded by the number of hops.

    In ``EXACT_STOPS`` mode only trips of exactly ``stop_count`` hops count.
    In ``MAXIMUM_STOPS`` mode every arrival at ``end`` after ``1..stop_count``
    hops counts, and the walk keeps going from ``end`` so longer trips that
    come back to it are counted too.

    Args:
        graph: Graph to walk.
        start: Node where trips begin.
        end: Node where trips end.
        stop_count: Hop bound, must be positive.
        mode: How ``stop_count`` is applied.

    Returns:
        Number of qualifying trips.

    Raises:
        InvalidArgumentError: If a node is None or ``stop_count <= 0``.
    """
    reject_if_none(start, "start")
    reject_if_none(end, "end")
    reject_if_not_positive(stop_count, "stop_count")

    trips = 0
    stack: List[Tuple[Node, int]] = [(start, 0)]
    while stack:
        node, count = stack.pop()

        if count > 0 and mode.accepts(count, stop_count) and node == end:
            trips += 1
            if mode is TripMode.EXACT_STOPS:
                continue

        if count >= stop_count:
            continue

        edges = graph.successors(node)
        if edges is None:
            continue

        # Reversed so edges are popped in insertion order
        for edge in reversed(edges):
            stack.append((edge.node, count + 1))

    return trips


def count_trips_by_distance(
    graph: RouteGraph,
    start: Node,
    end: Node,
    max_distance: Distance,
) -> int:
    """Count trips from ``start`` to ``end`` shorter than ``max_distance``.

    Every arrival at ``end`` with an accumulated distance strictly below
    ``max_distance`` counts, and the walk continues from ``end``. An arrival
    at exactly ``max_distance`` does not count.

    Args:
        graph: Graph to walk.
        start: Node where trips begin.
        end: Node where trips end.
        max_distance: Exclusive distance limit, must be positive.

    Returns:
        Number of qualifying trips.

    Raises:
        InvalidArgumentError: If a node is None or ``max_distance <= 0``.
    """
    reject_if_none(start, "start")
    reject_if_none(end, "end")
    reject_if_not_positive(max_distance, "max_distance")

    trips = 0
    stack: List[Tuple[Node, Distance]] = [(start, 0)]
    while stack:
        node, distance = stack.pop()

        if distance > 0 and node == end:
            trips += 1

        edges = graph.successors(node)
        if edges is None:
            continue

        for edge in reversed(edges):
            next_distance = distance + edge.distance
            # Distances only grow, nothing at or past the limit can count
            if next_distance < max_distance:
                stack.append((edge.node, next_distance))

    return trips
