import jsonschema
import pytest

from tripgraph.dsl.loader import load_scenario_yaml, scenario_schema


def test_minimal_scenario():
    data = load_scenario_yaml("edges: AB5\n")
    assert data == {"edges": "AB5"}


def test_structured_edges_and_queries():
    data = load_scenario_yaml(
        """
name: demo
edges:
  - {source: A, target: B, distance: 5}
queries:
  - {type: route, nodes: [A, B]}
  - {type: shortest, start: A, end: B, name: ab}
"""
    )
    assert data["name"] == "demo"
    assert len(data["queries"]) == 2


def test_top_level_must_be_mapping():
    with pytest.raises(ValueError, match="dictionary at top-level"):
        load_scenario_yaml("- AB5\n")


def test_unknown_top_level_key():
    with pytest.raises(ValueError, match="Unrecognized top-level key"):
        load_scenario_yaml("edges: AB5\nworkflow: []\n")


def test_empty_document_fails_schema():
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml("")


@pytest.mark.parametrize(
    "text",
    [
        "edges: []\nqueries:\n  - {type: fastest, start: A, end: B}\n",
        "edges: AB5\nqueries:\n  - {type: max_stops, start: A, end: B, stops: 0}\n",
        "edges:\n  - {source: A, target: B, distance: -3}\n",
        "edges:\n  - {source: A, target: B}\n",
        "edges: AB5\nqueries:\n  - {type: route, nodes: A-B, extra: 1}\n",
    ],
)
def test_schema_violations(text):
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml(text)


def test_schema_is_packaged():
    schema = scenario_schema()
    assert schema["required"] == ["edges"]
    assert "query" in schema["$defs"]
