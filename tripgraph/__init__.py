"""tripgraph: route and trip queries over small weighted directed graphs.

Primary API:
    GraphProcessor - Graph engine with edge insertion and the five queries
    RouteGraph - Adjacency-list graph the engine queries
    Node, Edge - Graph value types
    Scenario - Graph plus queries loaded from YAML
    to_networkx() / from_networkx() - NetworkX interop

Example:
    from tripgraph import Edge, GraphProcessor, Node

    a, b, c = Node("A"), Node("B"), Node("C")
    processor = GraphProcessor()
    processor.add_edge(a, Edge(b, 5))
    processor.add_edge(b, Edge(c, 4))

    processor.distance_of_route([a, b, c])      # 9
    processor.trips_with_max_stops(3, a, c)     # 1
    processor.shortest_distance(c, a)           # -1 (DISCONNECTED)
"""

from __future__ import annotations

from tripgraph import cli, logging
from tripgraph._version import __version__
from tripgraph.errors import InvalidArgumentError
from tripgraph.graph.convert import from_networkx, to_networkx
from tripgraph.graph.route_graph import RouteGraph
from tripgraph.model.elements import Edge, Node
from tripgraph.processor import GraphProcessor
from tripgraph.scenario import Query, QueryResult, Scenario
from tripgraph.types.base import DISCONNECTED, NO_ROUTE, Distance, QueryKind, TripMode

__all__ = [
    # Version
    "__version__",
    # Model
    "Node",
    "Edge",
    "RouteGraph",
    # Engine
    "GraphProcessor",
    "InvalidArgumentError",
    # Types
    "TripMode",
    "QueryKind",
    "Distance",
    "NO_ROUTE",
    "DISCONNECTED",
    # Scenarios
    "Scenario",
    "Query",
    "QueryResult",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
