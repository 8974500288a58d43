"""
Graph connectivity utilities.

This module provides reusable functions for inspecting graph structure:
- Connected component detection
- Connectivity check

Edges are read in both directions, so the components are the weakly
connected components of a directed graph.
"""

from __future__ import annotations

from collections import deque

from .base import Graph
from .types import Label


def connected_components(graph: Graph) -> list[list[Label]]:
    """
    Find connected components in a graph.

    Args:
        graph: Graph to inspect

    Returns:
        List of components, where each component is a list of labels.
        Components are ordered by their first registered node; members
        are listed in breadth-first discovery order.

    Example:
        graph = SparseGraph()
        graph.add_undirected_edge("a", "b").add_undirected_edge("c", "d")
        connected_components(graph)   # [['a', 'b'], ['c', 'd']]
    """
    # Build undirected adjacency
    adj: dict[Label, list[Label]] = {label: [] for label in graph}
    for label in adj:
        for neighbor in graph.neighbors(label):
            adj[label].append(neighbor)
            adj[neighbor].append(label)  # Always add reverse for connectivity

    visited: set[Label] = set()
    components: list[list[Label]] = []

    for start in adj:
        if start in visited:
            continue

        # BFS to find all nodes in this component
        component: list[Label] = []
        queue: deque[Label] = deque([start])
        visited.add(start)

        while queue:
            node = queue.popleft()
            component.append(node)

            for neighbor in adj[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        components.append(component)

    return components


def is_connected(graph: Graph) -> bool:
    """
    Check if a graph is connected.

    Args:
        graph: Graph to inspect

    Returns:
        True if graph is connected, False otherwise. Graphs with fewer
        than two nodes are connected.
    """
    if len(graph) <= 1:
        return True
    return len(connected_components(graph)) == 1


__all__ = [
    "connected_components",
    "is_connected",
]
