"""Scenario class for running graph queries defined in YAML.

A scenario bundles a graph and an ordered list of queries::

    name: trains
    edges: "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"
    queries:
      - {type: route, nodes: A-B-C}
      - {type: exact_stops, start: A, end: C, stops: 4}
      - {type: max_stops, start: C, end: C, stops: 3}
      - {type: distance_limit, start: C, end: C, limit: 30}
      - {type: shortest, start: B, end: B}

``edges`` may also be a list of ``{source, target, distance}`` mappings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from tripgraph.config import ReportConfig
from tripgraph.dsl.edges import parse_graph_spec
from tripgraph.dsl.loader import load_scenario_yaml
from tripgraph.graph.route_graph import RouteGraph
from tripgraph.logging import get_logger
from tripgraph.model.elements import Edge, Node
from tripgraph.processor import GraphProcessor
from tripgraph.report import render_result
from tripgraph.types.base import QueryKind

_REQUIRED_FIELDS: Dict[QueryKind, Tuple[str, ...]] = {
    QueryKind.ROUTE: ("nodes",),
    QueryKind.EXACT_STOPS: ("start", "end", "stops"),
    QueryKind.MAX_STOPS: ("start", "end", "stops"),
    QueryKind.DISTANCE_LIMIT: ("start", "end", "limit"),
    QueryKind.SHORTEST: ("start", "end"),
}


@dataclass
class Query:
    """One question asked of the graph.

    Attributes:
        kind: Query type.
        nodes: Route for ``ROUTE`` queries.
        start: Start node for every other query type.
        end: End node for every other query type.
        bound: Hop bound (``EXACT_STOPS``/``MAX_STOPS``) or distance limit
            (``DISTANCE_LIMIT``).
        name: Optional label used in logs and JSON output.
    """

    kind: QueryKind
    nodes: List[Node] = field(default_factory=list)
    start: Optional[Node] = None
    end: Optional[Node] = None
    bound: Optional[int] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Query:
        """Build a Query from one entry of the scenario ``queries`` list.

        Raises:
            ValueError: If the type is unknown or a field it needs is missing.
        """
        kind = QueryKind.from_string(data["type"])
        missing = [key for key in _REQUIRED_FIELDS[kind] if key not in data]
        if missing:
            raise ValueError(
                f"Query of type '{kind.value}' is missing field(s): {', '.join(missing)}"
            )

        nodes: List[Node] = []
        if kind is QueryKind.ROUTE:
            raw = data["nodes"]
            labels = raw.split("-") if isinstance(raw, str) else list(raw)
            nodes = [Node(label.strip()) for label in labels]

        return cls(
            kind=kind,
            nodes=nodes,
            start=Node(data["start"]) if "start" in data else None,
            end=Node(data["end"]) if "end" in data else None,
            bound=data.get("stops", data.get("limit")),
            name=data.get("name"),
        )

    def describe(self) -> str:
        """Return a short description such as ``"route A-B-C"``."""
        if self.kind is QueryKind.ROUTE:
            return f"route {'-'.join(str(n) for n in self.nodes)}"
        text = f"{self.kind.value} {self.start} -> {self.end}"
        if self.bound is not None:
            text += f" ({self.bound})"
        return text

    def execute(self, processor: GraphProcessor) -> int:
        """Run the query against ``processor`` and return its raw result."""
        if self.kind is QueryKind.ROUTE:
            return processor.distance_of_route(self.nodes)
        if self.kind is QueryKind.EXACT_STOPS:
            return processor.trips_with_exact_stops(self.bound, self.start, self.end)
        if self.kind is QueryKind.MAX_STOPS:
            return processor.trips_with_max_stops(self.bound, self.start, self.end)
        if self.kind is QueryKind.DISTANCE_LIMIT:
            return processor.trips_with_distance_limit(
                self.bound, self.start, self.end
            )
        return processor.shortest_distance(self.start, self.end)


@dataclass
class QueryResult:
    """Outcome of one query."""

    query: Query
    value: int

    def render(self, config: Optional[ReportConfig] = None) -> str:
        """Render ``value`` as text, replacing the -1 sentinel with a message."""
        return render_result(self.query.kind, self.value, config)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.query.name,
            "type": self.query.kind.value,
            "query": self.query.describe(),
            "value": self.value,
            "text": self.render(),
        }


@dataclass
class Scenario:
    """A graph plus the queries to run against it.

    Typical usage example:

        scenario = Scenario.from_yaml(yaml_str)
        for result in scenario.run():
            print(result.render())
    """

    graph: RouteGraph
    queries: List[Query] = field(default_factory=list)
    name: Optional[str] = None

    _logger = get_logger(__name__)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> Scenario:
        """Construct a Scenario from a YAML string.

        Raises:
            ValueError: On malformed content (unknown keys, bad edge tokens,
                queries missing fields).
            jsonschema.ValidationError: If the document fails schema validation.
        """
        data = load_scenario_yaml(yaml_str)

        edges = data.get("edges", "")
        if isinstance(edges, str):
            graph = parse_graph_spec(edges)
        else:
            graph = RouteGraph()
            for entry in edges:
                graph.add_edge(
                    Node(entry["source"]),
                    Edge(Node(entry["target"]), entry["distance"]),
                )

        queries = [Query.from_dict(q) for q in data.get("queries") or []]
        cls._logger.debug(
            "Loaded scenario %r: %d nodes, %d edges, %d queries",
            data.get("name"),
            graph.number_of_nodes(),
            graph.number_of_edges(),
            len(queries),
        )
        return cls(graph=graph, queries=queries, name=data.get("name"))

    def run(self) -> List[QueryResult]:
        """Run every query in order and return the results."""
        processor = GraphProcessor(self.graph)
        self._logger.info(
            "Running scenario %s with %d queries", self.name or "<unnamed>", len(self.queries)
        )
        results = [QueryResult(q, q.execute(processor)) for q in self.queries]
        self._logger.info("Scenario %s completed", self.name or "<unnamed>")
        return results
