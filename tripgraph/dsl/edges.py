"""Compact edge notation.

Graphs are often written as a list of three-part tokens such as ``AB5``: a
single-character source label, a single-character destination label and a
positive integer distance. Tokens are separated by commas and/or whitespace::

    AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7
"""

from __future__ import annotations

import re
from typing import List, Tuple

from tripgraph.graph.route_graph import RouteGraph
from tripgraph.model.elements import Edge, Node

_EDGE_RE = re.compile(r"^(\S)(\S)(\d+)$")
_SEPARATOR_RE = re.compile(r"[,\s]+")


def parse_edge_spec(token: str) -> Tuple[Node, Edge]:
    """Parse one ``<src><dst><distance>`` token.

    Args:
        token: Token such as ``"AB5"``.

    Returns:
        ``(source_node, edge)``.

    Raises:
        ValueError: If the token is malformed or the distance is not positive.
    """
    match = _EDGE_RE.match(token.strip())
    if match is None:
        raise ValueError(
            f"Invalid edge '{token}': expected <source><target><distance>, e.g. 'AB5'"
        )
    src, dst, distance = match.groups()
    return Node(src), Edge(Node(dst), int(distance))


def split_graph_spec(spec: str) -> List[str]:
    """Split a graph description into edge tokens, dropping empty pieces."""
    return [token for token in _SEPARATOR_RE.split(spec.strip()) if token]


def parse_graph_spec(spec: str) -> RouteGraph:
    """Build a RouteGraph from a comma/whitespace separated list of edge tokens.

    Raises:
        ValueError: If any token is malformed.
    """
    graph = RouteGraph()
    for token in split_graph_spec(spec):
        node, edge = parse_edge_spec(token)
        graph.add_edge(node, edge)
    return graph
