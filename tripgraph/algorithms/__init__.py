"""Query algorithms over a RouteGraph.

- `route.route_distance`: weight of an explicit route.
- `trips.count_trips_by_stops`: trips bounded by hop count.
- `trips.count_trips_by_distance`: trips bounded by accumulated weight.
- `shortest.shortest_distance`: breadth-first shortest accumulated weight.
"""

from tripgraph.algorithms.route import route_distance
from tripgraph.algorithms.shortest import bfs_distances, shortest_distance
from tripgraph.algorithms.trips import count_trips_by_distance, count_trips_by_stops

__all__ = [
    "route_distance",
    "count_trips_by_stops",
    "count_trips_by_distance",
    "bfs_distances",
    "shortest_distance",
]
