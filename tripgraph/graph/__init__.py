"""Graph primitives and helpers.

This package provides the adjacency-list graph type `RouteGraph` and the
`convert` module for NetworkX interop.
"""

from tripgraph.graph.route_graph import RouteGraph

__all__ = ["RouteGraph"]
