"""YAML loader + schema validation for scenario files.

Provides a single entrypoint to parse a YAML string, validate it against the
packaged JSON schema, and return a plain dictionary for `Scenario.from_yaml`.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

RECOGNIZED_KEYS = frozenset({"name", "edges", "queries"})


@lru_cache(maxsize=1)
def scenario_schema() -> Dict[str, Any]:
    """Return the packaged scenario JSON schema."""
    with (
        resources.files("tripgraph.schemas")
        .joinpath("scenario.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_scenario_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a scenario YAML string.

    Args:
        yaml_str: YAML document text.

    Returns:
        The parsed scenario dictionary.

    Raises:
        ValueError: If the document is not a mapping or has unknown top-level keys.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in scenario: {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    jsonschema.validate(data, scenario_schema())
    return data
