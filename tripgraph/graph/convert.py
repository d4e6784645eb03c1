"""Graph conversion utilities between RouteGraph and NetworkX graphs.

``to_networkx`` keeps every parallel edge by producing a ``MultiDiGraph``;
``from_networkx`` accepts any directed NetworkX graph whose edges carry an
integer weight attribute.
"""

from typing import Union

import networkx as nx

from tripgraph.graph.route_graph import RouteGraph
from tripgraph.model.elements import Edge, Node

NxDirectedGraph = Union[nx.DiGraph, nx.MultiDiGraph]


def to_networkx(graph: RouteGraph, weight: str = "distance") -> nx.MultiDiGraph:
    """Convert a RouteGraph to a NetworkX MultiDiGraph.

    Node labels become NetworkX node ids. Each edge gets one attribute named
    ``weight`` holding its distance. Edges are added in the RouteGraph's
    insertion order, so parallel edges keep their relative order as keys
    ``0, 1, ...``.

    Args:
        graph: Graph to convert.
        weight: Name of the edge attribute that receives the distance.

    Returns:
        A new NetworkX MultiDiGraph.
    """
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(node.value for node in graph.nodes())
    for src, edge in graph.edges():
        nx_graph.add_edge(src.value, edge.node.value, **{weight: edge.distance})
    return nx_graph


def from_networkx(nx_graph: NxDirectedGraph, weight: str = "distance") -> RouteGraph:
    """Convert a directed NetworkX graph to a RouteGraph.

    Outgoing edges are added in NetworkX adjacency order, which groups a
    source's edges by neighbor (first-seen neighbor first, parallel edges in
    key order). A RouteGraph whose outgoing list interleaves neighbors, such
    as ``A->B, A->C, A->B``, comes back as ``A->B, A->B, A->C``. The route
    evaluator takes the first matching parallel edge and the shortest-distance
    search relaxes edges in list order, so a round trip keeps their results
    only when each source's edges to the same neighbor were already adjacent.

    Args:
        nx_graph: Directed NetworkX graph (DiGraph or MultiDiGraph).
        weight: Edge attribute holding the positive integer distance.

    Returns:
        A new RouteGraph with one Edge per NetworkX edge.

    Raises:
        ValueError: If the graph is undirected or an edge lacks ``weight``.
        InvalidArgumentError: If a weight is not a positive integer.
    """
    if not nx_graph.is_directed():
        raise ValueError("Only directed NetworkX graphs can be converted.")

    graph = RouteGraph()
    for u, v, data in nx_graph.edges(data=True):
        if weight not in data:
            raise ValueError(f"Edge '{u}' -> '{v}' has no '{weight}' attribute.")
        graph.add_edge(Node(u), Edge(Node(v), data[weight]))
    return graph
