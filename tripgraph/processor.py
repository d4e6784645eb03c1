"""Graph engine: edge insertion and the five graph queries.

`GraphProcessor` owns a `RouteGraph` and answers queries against it. Results
are returned as integers; the ``-1`` sentinel (``NO_ROUTE`` or
``DISCONNECTED``) marks an unreachable route. Rendering results for people is
left to `tripgraph.report`.

Example:
    >>> from tripgraph import Edge, GraphProcessor, Node
    >>> a, b, c = Node("A"), Node("B"), Node("C")
    >>> processor = GraphProcessor()
    >>> processor.add_edge(a, Edge(b, 5))
    >>> processor.add_edge(b, Edge(c, 4))
    >>> processor.distance_of_route([a, b, c])
    9
"""

from __future__ import annotations

from typing import Optional, Sequence

from tripgraph.algorithms.route import route_distance
from tripgraph.algorithms.shortest import shortest_distance
from tripgraph.algorithms.trips import count_trips_by_distance, count_trips_by_stops
from tripgraph.graph.route_graph import RouteGraph
from tripgraph.logging import get_logger
from tripgraph.model.elements import Edge, Node
from tripgraph.types.base import Distance, TripMode

logger = get_logger(__name__)


class GraphProcessor:
    """Query engine over a growing, directed, weighted graph.

    Queries never modify the graph, so repeating a query on an unchanged graph
    gives the same answer. The processor is not thread-safe; finish inserting
    edges before querying from several threads.
    """

    def __init__(self, graph: Optional[RouteGraph] = None) -> None:
        self._graph = graph if graph is not None else RouteGraph()

    @property
    def graph(self) -> RouteGraph:
        """The underlying graph."""
        return self._graph

    def add_edge(self, node: Node, edge: Edge) -> None:
        """Add ``edge`` as an outgoing edge of ``node``.

        Raises:
            InvalidArgumentError: If ``node`` or ``edge`` is None.
        """
        self._graph.add_edge(node, edge)
        logger.debug("Added edge %s -> %s (%s)", node, edge.node, edge.distance)

    def distance_of_route(self, nodes: Optional[Sequence[Optional[Node]]]) -> Distance:
        """Return the distance along ``nodes`` taken in order.

        Returns:
            The summed distance, or ``NO_ROUTE`` (-1) if any hop has no direct
            edge or the route has fewer than two nodes.
        """
        distance = route_distance(self._graph, nodes)
        logger.debug("Route %s: distance=%s", _format_route(nodes), distance)
        return distance

    def trips_with_exact_stops(self, stop_count: int, start: Node, end: Node) -> int:
        """Count trips from ``start`` to ``end`` with exactly ``stop_count`` hops.

        Raises:
            InvalidArgumentError: If a node is None or ``stop_count <= 0``.
        """
        trips = count_trips_by_stops(
            self._graph, start, end, stop_count, TripMode.EXACT_STOPS
        )
        logger.debug(
            "Trips %s -> %s with exactly %s stops: %s", start, end, stop_count, trips
        )
        return trips

    def trips_with_max_stops(self, stop_count: int, start: Node, end: Node) -> int:
        """Count trips from ``start`` to ``end`` with at most ``stop_count`` hops.

        Raises:
            InvalidArgumentError: If a node is None or ``stop_count <= 0``.
        """
        trips = count_trips_by_stops(
            self._graph, start, end, stop_count, TripMode.MAXIMUM_STOPS
        )
        logger.debug(
            "Trips %s -> %s with at most %s stops: %s", start, end, stop_count, trips
        )
        return trips

    def trips_with_distance_limit(
        self, max_distance: Distance, start: Node, end: Node
    ) -> int:
        """Count trips from ``start`` to ``end`` shorter than ``max_distance``.

        Raises:
            InvalidArgumentError: If a node is None or ``max_distance <= 0``.
        """
        trips = count_trips_by_distance(self._graph, start, end, max_distance)
        logger.debug(
            "Trips %s -> %s shorter than %s: %s", start, end, max_distance, trips
        )
        return trips

    def shortest_distance(self, start: Node, end: Node) -> Distance:
        """Return the shortest distance from ``start`` to ``end``.

        Returns:
            The distance, or ``DISCONNECTED`` (-1) if ``end`` is unreachable.

        Raises:
            InvalidArgumentError: If a node is None.
        """
        distance = shortest_distance(self._graph, start, end)
        logger.debug("Shortest distance %s -> %s: %s", start, end, distance)
        return distance


def _format_route(nodes: Optional[Sequence[Optional[Node]]]) -> str:
    if nodes is None:
        return "None"
    return "-".join(str(node) for node in nodes)
