"""
Route finding.

Breadth-first shortest routes over any graph store. Edges are unweighted,
so a shortest route is one with the fewest hops.
"""

from .bfs import find_route, has_route, route_distances

__all__ = [
    "find_route",
    "has_route",
    "route_distances",
]
