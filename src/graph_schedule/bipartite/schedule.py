"""
Two-way conflict-free scheduling.

Reads a graph as a conflict graph: an edge between two nodes means they
may not share a group. A schedule splits the nodes into two groups with no
conflict inside either group, which exists exactly when the graph is
bipartite.
"""

from __future__ import annotations

import warnings
from collections import deque
from typing import AbstractSet

from ..base import Graph
from ..types import Label, PartitionLike, Schedule
from ..validation import GraphStructureWarning, NoScheduleError


def validate_schedule(graph: Graph, partition: PartitionLike) -> bool:
    """
    Check whether a proposed partition is a valid schedule for a graph.

    A partition is valid when it has exactly two groups, the groups are
    disjoint, together they hold exactly the graph's nodes, and no edge
    joins two nodes of the same group. A node with a self-edge conflicts
    with its own group.

    Args:
        graph: Conflict graph
        partition: Sequence of label groups, e.g. a Schedule or a list of sets

    Returns:
        True if every condition holds
    """
    if len(partition) != 2:
        return False

    first, second = (set(group) for group in partition)

    merged = first | second
    if len(merged) != len(first) + len(second):
        return False
    if merged != graph.all_nodes():
        return False

    return not (_has_conflicts(graph, first) or _has_conflicts(graph, second))


def _has_conflicts(graph: Graph, group: AbstractSet[Label]) -> bool:
    """Check if any edge has both endpoints in group."""
    for node in group:
        for neighbor in graph.neighbors(node):
            if neighbor in group:
                return True
    return False


def compute_schedule(graph: Graph) -> Schedule:
    """
    Compute a two-way schedule by breadth-first 2-coloring.

    Components are colored one at a time, seeds taken in registration
    order, and each new seed goes to the group opposite the previous
    seed's. A node dequeued from the work queue is first checked against
    its already placed conflicts, then placed in its tentative group, and
    only then propagates the opposite group to its unplaced conflicts.
    The tentative group propagated last wins.

    Edges are read in both directions. Directed edges without a reverse
    trigger a GraphStructureWarning.

    Args:
        graph: Conflict graph

    Returns:
        Schedule whose groups cover every node with no internal conflict

    Raises:
        NoScheduleError: If the graph has an odd cycle or a self-edge
    """
    return _two_color(graph, stacklevel=4)


def _two_color(graph: Graph, stacklevel: int) -> Schedule:
    """Run the 2-coloring; stacklevel is counted from _conflict_lists."""
    conflicts = _conflict_lists(graph, stacklevel)

    placed: dict[Label, int] = {}
    tentative: dict[Label, int] = {}
    queue: deque[Label] = deque()
    current = 0

    for seed in graph:
        if seed in placed:
            continue

        _place(seed, current, conflicts, placed)
        current = 1 - current
        for first_neighbor in conflicts[seed]:
            queue.append(first_neighbor)
            tentative[first_neighbor] = current

        while queue:
            node = queue.popleft()
            if node in placed:
                continue

            group = tentative[node]
            _place(node, group, conflicts, placed)

            for next_neighbor in conflicts[node]:
                if next_neighbor not in placed:
                    tentative[next_neighbor] = 1 - group
                    queue.append(next_neighbor)

    return Schedule(
        frozenset(label for label, group in placed.items() if group == 0),
        frozenset(label for label, group in placed.items() if group == 1),
    )


def _place(
    node: Label,
    group: int,
    conflicts: dict[Label, list[Label]],
    placed: dict[Label, int],
) -> None:
    """Place node in group, failing if a conflict already sits there."""
    for neighbor in conflicts[node]:
        if neighbor == node or placed.get(neighbor) == group:
            raise NoScheduleError(node)
    placed[node] = group


def _conflict_lists(graph: Graph, stacklevel: int) -> dict[Label, list[Label]]:
    """
    Build undirected conflict lists for every node.

    Each list holds the node's out-neighbors in store order followed by
    in-neighbors that are not also out-neighbors.
    """
    outgoing = {label: graph.neighbors(label) for label in graph}
    outgoing_sets = {label: set(targets) for label, targets in outgoing.items()}
    conflicts = {label: list(targets) for label, targets in outgoing.items()}

    one_way = 0
    for label, targets in outgoing.items():
        for target in targets:
            if label not in outgoing_sets[target]:
                conflicts[target].append(label)
                one_way += 1

    if one_way:
        warnings.warn(
            f"Found {one_way} directed edge(s) without a reverse edge. "
            "Scheduling treats every edge as a conflict in both directions.",
            GraphStructureWarning,
            stacklevel=stacklevel,
        )

    return conflicts


def is_bipartite(graph: Graph) -> bool:
    """
    Check if a graph admits a two-way schedule.

    Args:
        graph: Conflict graph

    Returns:
        True if compute_schedule succeeds
    """
    try:
        _two_color(graph, stacklevel=4)
    except NoScheduleError:
        return False
    return True


__all__ = [
    "validate_schedule",
    "compute_schedule",
    "is_bipartite",
]
