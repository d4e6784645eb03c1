"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from tripgraph.logging import (
    configure_cli_logging,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from tripgraph.model.elements import Edge, Node
from tripgraph.processor import GraphProcessor


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("tripgraph.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("tripgraph.module1")
    logger2 = get_logger("tripgraph.module2")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("tripgraph.module3")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("tripgraph")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1

    set_global_log_level(logging.ERROR)
    assert root_logger.level == logging.ERROR


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    logger = get_logger("tripgraph.test.format")
    logger.info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:tripgraph.test.format" in out
    assert "MSG:hello" in out


def test_reset_logging_clears_handlers():
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    reset_logging()
    root_logger = logging.getLogger("tripgraph")
    assert root_logger.handlers == []
    assert root_logger.level == logging.NOTSET


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        ({}, logging.INFO),
        ({"verbose": True}, logging.DEBUG),
        ({"quiet": True}, logging.WARNING),
        ({"machine_output": True}, logging.WARNING),
        ({"verbose": True, "machine_output": True}, logging.DEBUG),
        ({"verbose": True, "quiet": True}, logging.DEBUG),
    ],
)
def test_configure_cli_logging_levels(kwargs, expected):
    assert configure_cli_logging(**kwargs) == expected
    assert logging.getLogger("tripgraph").level == expected
    assert get_logger("tripgraph.cli").getEffectiveLevel() == expected


def test_machine_output_keeps_query_records_off_the_handler():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    configure_cli_logging(machine_output=True)

    processor = GraphProcessor()
    processor.add_edge(Node("A"), Edge(Node("B"), 5))
    processor.distance_of_route([Node("A"), Node("B")])
    get_logger("tripgraph.scenario").info("Running scenario")

    assert capture.getvalue() == ""


def test_debug_level_shows_query_records():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    enable_debug_logging()

    processor = GraphProcessor()
    processor.add_edge(Node("A"), Edge(Node("B"), 5))
    assert processor.shortest_distance(Node("A"), Node("B")) == 5

    out = capture.getvalue()
    assert "tripgraph.processor - DEBUG - Added edge A -> B (5)" in out
    assert "Shortest distance A -> B: 5" in out
