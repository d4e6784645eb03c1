"""Global pytest configuration and shared graph fixtures.

The ``trains`` fixture is the nine-edge reference graph used across the suite:

    A→B=5  B→C=4  C→D=8  D→C=8  A→D=5
    C→E=2  E→B=3  A→E=7  D→E=6
"""

from __future__ import annotations

import pytest

from tripgraph.graph.route_graph import RouteGraph
from tripgraph.model.elements import Edge, Node
from tripgraph.processor import GraphProcessor

TRAINS_EDGES = [
    ("A", "B", 5),
    ("B", "C", 4),
    ("C", "D", 8),
    ("D", "C", 8),
    ("A", "D", 5),
    ("C", "E", 2),
    ("E", "B", 3),
    ("A", "E", 7),
    ("D", "E", 6),
]


def _build_graph(edges) -> RouteGraph:
    graph = RouteGraph()
    for src, dst, distance in edges:
        graph.add_edge(Node(src), Edge(Node(dst), distance))
    return graph


@pytest.fixture
def make_graph():
    """Return a builder taking ``(source, target, distance)`` triples."""
    return _build_graph


@pytest.fixture
def trains():
    return _build_graph(TRAINS_EDGES)


@pytest.fixture
def trains_spec():
    """The ``trains`` graph in compact ``AB5, BC4, ...`` notation."""
    return ", ".join(f"{s}{t}{d}" for s, t, d in TRAINS_EDGES)


@pytest.fixture
def processor(trains):
    return GraphProcessor(trains)
