"""Human-readable rendering of query results.

The graph engine only returns numbers. This module turns them into the text
shown by the CLI, replacing the ``-1`` sentinel with a fixed message.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from tripgraph.config import REPORT_CONFIG, ReportConfig
from tripgraph.types.base import DISCONNECTED, NO_ROUTE, QueryKind


def render_result(
    kind: QueryKind, value: int, config: Optional[ReportConfig] = None
) -> str:
    """Render one query result.

    Args:
        kind: Query type that produced ``value``.
        value: Query result.
        config: Rendering settings (defaults to ``REPORT_CONFIG``).

    Returns:
        ``str(value)``, or the configured sentinel text for ``ROUTE`` and
        ``SHORTEST`` results equal to -1.
    """
    config = config or REPORT_CONFIG
    if kind is QueryKind.ROUTE and value == NO_ROUTE:
        return config.no_route_text
    if kind is QueryKind.SHORTEST and value == DISCONNECTED:
        return config.disconnected_text
    return str(value)


def render_lines(
    results: Iterable[tuple[QueryKind, int]], config: Optional[ReportConfig] = None
) -> List[str]:
    """Render results as numbered lines, e.g. ``"Output #1: 9"``."""
    config = config or REPORT_CONFIG
    return [
        f"{config.label(i)}: {render_result(kind, value, config)}"
        for i, (kind, value) in enumerate(results, start=1)
    ]
