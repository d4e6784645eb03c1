"""Graph model package.

Defines the value types stored in a `RouteGraph`: `Node` (a labelled vertex)
and `Edge` (a weighted link to a destination node).
"""

from tripgraph.model.elements import Edge, Node

__all__ = [
    "Node",
    "Edge",
]
