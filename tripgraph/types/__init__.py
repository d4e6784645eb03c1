"""Shared typing constructs for tripgraph.

Type aliases, sentinels and enums used by the graph model and the query
algorithms. Contains no graph logic.
"""

from tripgraph.types.base import DISCONNECTED, NO_ROUTE, Distance, QueryKind, TripMode

__all__ = [
    # Enums
    "TripMode",
    "QueryKind",
    # Type aliases and sentinels
    "Distance",
    "NO_ROUTE",
    "DISCONNECTED",
]
