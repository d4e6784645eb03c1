import json
import logging
from pathlib import Path

import pytest

from tripgraph import cli
from tripgraph.logging import reset_logging

SCENARIO = """
name: trains
edges: "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"
queries:
  - {type: route, nodes: A-B-C}
  - {type: route, nodes: A-E-D}
  - {type: exact_stops, start: A, end: C, stops: 4}
  - {type: shortest, start: D, end: A}
"""


def output_lines(out: str) -> list[str]:
    """Return the result lines, dropping log records written to stdout."""
    return [line for line in out.splitlines() if line.startswith("Output #")]


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def scenario_file(tmp_path: Path) -> Path:
    path = tmp_path / "trains.yaml"
    path.write_text(SCENARIO)
    return path


def test_run_prints_numbered_outputs(scenario_file: Path, capsys) -> None:
    cli.main(["run", str(scenario_file)])
    out = output_lines(capsys.readouterr().out)

    assert out == [
        "Output #1: 9",
        "Output #2: NO SUCH ROUTE",
        "Output #3: 3",
        "Output #4: NODES ARE DISCONNECTED",
    ]


def test_run_json(scenario_file: Path, capsys) -> None:
    cli.main(["run", str(scenario_file), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert payload["scenario"] == "trains"
    assert [r["value"] for r in payload["results"]] == [9, -1, 3, -1]
    assert payload["results"][3]["text"] == "NODES ARE DISCONNECTED"


def test_inspect(scenario_file: Path, capsys) -> None:
    cli.main(["inspect", str(scenario_file)])
    out = capsys.readouterr().out

    assert "Scenario: trains" in out
    assert "Nodes: 5" in out
    assert "Edges: 9" in out
    assert "A: B=5, D=5, E=7" in out
    assert "1. route A-B-C" in out


def test_inspect_shows_dead_ends(tmp_path: Path, capsys) -> None:
    path = tmp_path / "line.yaml"
    path.write_text("edges: AB5\n")
    cli.main(["inspect", str(path)])
    out = capsys.readouterr().out

    assert "Scenario: line" in out
    assert "B: (dead end)" in out


def test_missing_file_exits_1(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1
    assert "Scenario file not found" in capsys.readouterr().out


def test_invalid_scenario_exits_1(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("edges: AB5\nqueries:\n  - {type: fastest}\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(path)])
    assert exc_info.value.code == 1
    assert "Failed to load scenario" in capsys.readouterr().out


def test_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: tripgraph" in capsys.readouterr().out


def test_verbose_and_quiet_switch_levels(scenario_file: Path, caplog, capsys) -> None:
    with caplog.at_level(logging.DEBUG, logger="tripgraph"):
        cli.main(["--verbose", "run", str(scenario_file)])
    assert any("Debug logging enabled" in r.message for r in caplog.records)
    assert any("Route A-B-C: distance=9" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="tripgraph"):
        cli.main(["--quiet", "run", str(scenario_file)])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_run_json_stdout_is_only_the_document(scenario_file: Path, capsys) -> None:
    cli.main(["run", str(scenario_file), "--json"])
    out = capsys.readouterr().out

    assert out.startswith("{")
    assert " - INFO - " not in out
    json.loads(out)


def test_run_json_keeps_info_records_out_of_stdout(
    scenario_file: Path, caplog
) -> None:
    with caplog.at_level(logging.INFO, logger="tripgraph"):
        cli.main(["run", str(scenario_file), "--json"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)
