"""
Unweighted shortest routes by breadth-first search.

Routes follow directed edges only; an undirected edge qualifies because it
is stored as two directed edges. Among equally short routes, the one found
first in the store's neighbor order is returned.
"""

from __future__ import annotations

from collections import deque

from ..base import Graph
from ..types import Label, Route
from ..validation import NoRouteError


def find_route(graph: Graph, source: Label, target: Label) -> Route:
    """
    Find a shortest route between two nodes.

    Args:
        graph: Graph to search
        source: Label to start from
        target: Label to reach

    Returns:
        Labels from source to target inclusive. A node routes to itself
        as [source].

    Raises:
        NoRouteError: If no directed path leads from source to target

    Example:
        graph = SparseGraph()
        graph.add_directed_edge("1", "2").add_directed_edge("2", "3")
        find_route(graph, "1", "3")   # ['1', '2', '3']
    """
    if source == target:
        return [source]
    if source not in graph:
        raise NoRouteError(source, target)

    visited: set[Label] = {source}
    queue: deque[Label] = deque([source])
    came_from: dict[Label, Label] = {}

    while queue:
        node = queue.popleft()
        if node == target:
            return _construct_route(source, target, came_from)

        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
                # First discovery wins
                came_from.setdefault(neighbor, node)

    raise NoRouteError(source, target)


def _construct_route(source: Label, target: Label, came_from: dict[Label, Label]) -> Route:
    """Walk predecessors back from target to source."""
    route: Route = []
    node = target
    while node != source:
        route.append(node)
        node = came_from[node]
    route.append(source)
    route.reverse()
    return route


def has_route(graph: Graph, source: Label, target: Label) -> bool:
    """
    Check if a directed path leads from source to target.

    Args:
        graph: Graph to search
        source: Label to start from
        target: Label to reach

    Returns:
        True if find_route would succeed
    """
    try:
        find_route(graph, source, target)
    except NoRouteError:
        return False
    return True


def route_distances(graph: Graph, source: Label) -> dict[Label, int]:
    """
    Compute hop counts from a node to every node it can reach.

    Args:
        graph: Graph to search
        source: Registered label to start from

    Returns:
        Mapping of reachable label -> number of edges on a shortest route.
        The source maps to 0.

    Raises:
        UnknownNodeError: If source is not registered
    """
    distances: dict[Label, int] = {source: 0}
    queue: deque[Label] = deque([source])

    while queue:
        node = queue.popleft()
        for neighbor in graph.neighbors(node):
            if neighbor not in distances:
                distances[neighbor] = distances[node] + 1
                queue.append(neighbor)

    return distances


__all__ = [
    "find_route",
    "has_route",
    "route_distances",
]
