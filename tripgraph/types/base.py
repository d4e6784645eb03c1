"""Base enums, aliases and sentinels for graph queries."""

from __future__ import annotations

from enum import Enum, IntEnum

#: Accumulated edge weight along a walk. Edge distances are positive integers.
Distance = int

#: Returned by the fixed-route evaluator when a hop has no direct edge.
NO_ROUTE: Distance = -1

#: Returned by the shortest-distance query when the end node is never reached.
DISCONNECTED: Distance = -1


class TripMode(IntEnum):
    """How a hop bound is applied when counting trips."""

    #: Only trips with exactly ``bound`` hops count.
    EXACT_STOPS = 1
    #: Every landing on the end node within ``1..bound`` hops counts.
    MAXIMUM_STOPS = 2

    def accepts(self, count: int, bound: int) -> bool:
        """Return True if a trip of ``count`` hops satisfies ``bound`` in this mode."""
        if self is TripMode.EXACT_STOPS:
            return count == bound
        return count <= bound


class QueryKind(str, Enum):
    """Query types understood by the scenario runner and the reporter."""

    ROUTE = "route"
    EXACT_STOPS = "exact_stops"
    MAX_STOPS = "max_stops"
    DISTANCE_LIMIT = "distance_limit"
    SHORTEST = "shortest"

    @classmethod
    def from_string(cls, value: str) -> "QueryKind":
        """Parse a string into a QueryKind.

        Args:
            value: Case-insensitive query type (e.g., "route", "MAX_STOPS").

        Returns:
            The corresponding QueryKind member.

        Raises:
            ValueError: If the string doesn't match any query type.
        """
        try:
            return cls(value.lower())
        except ValueError:
            valid = ", ".join(e.value for e in cls)
            raise ValueError(
                f"Invalid query type '{value}'. Valid values are: {valid}"
            ) from None
