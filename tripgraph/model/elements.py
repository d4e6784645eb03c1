"""Node and Edge value types.

Both classes are frozen dataclasses: two nodes built from the same label are
interchangeable as dictionary keys, and two edges are equal when they lead to
the same node with the same distance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

from tripgraph.errors import InvalidArgumentError
from tripgraph.types.base import Distance
from tripgraph.utils.checks import reject_if_none, reject_if_not_positive


@dataclass(frozen=True)
class Node:
    """A graph vertex identified by a single label.

    Attributes:
        value: Hashable, equality-comparable label (a single character in the
            usual rail-network data sets). Cannot be ``None``.
    """

    value: Hashable

    def __post_init__(self) -> None:
        """Reject a missing label."""
        reject_if_none(self.value, "value")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Edge:
    """A directed, weighted connection to a destination node.

    The source node is not stored; it is the adjacency entry that holds the
    edge.

    Attributes:
        node: Destination node.
        distance: Positive integer weight of the edge.
    """

    node: Node
    distance: Distance

    def __post_init__(self) -> None:
        """Validate the destination and the distance."""
        reject_if_none(self.node, "node")
        if not isinstance(self.node, Node):
            raise InvalidArgumentError(
                f"node must be a Node, got {type(self.node).__name__}."
            )
        if isinstance(self.distance, bool) or not isinstance(self.distance, int):
            raise InvalidArgumentError(
                f"distance must be an integer, got {self.distance!r}."
            )
        reject_if_not_positive(self.distance, "distance")
