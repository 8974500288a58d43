"""
Common types for graph stores and graph algorithms.

This module provides the value types shared across the package:
- Label: Node identity (an opaque string)
- Route: Ordered sequence of labels from origin to destination
- Schedule: Two-way partition of a graph's nodes
"""

from __future__ import annotations

from typing import Collection, NamedTuple, Sequence, Union

Label = str
"""Node identity: an opaque, externally supplied string."""

Route = list[Label]
"""Route from origin to destination, both endpoints included."""


class Schedule(NamedTuple):
    """
    Two-way partition of a graph's nodes.

    Produced by the scheduler and immutable once returned. The groups are
    disjoint and together cover every node of the graph they were computed
    for.

    Attributes:
        first: Labels placed in the first group
        second: Labels placed in the second group
    """

    first: frozenset[Label]
    second: frozenset[Label]

    def group_of(self, label: Label) -> int:
        """
        Get the group index (0 or 1) holding a label.

        Raises:
            KeyError: If the label is in neither group
        """
        if label in self.first:
            return 0
        if label in self.second:
            return 1
        raise KeyError(label)

    def __repr__(self) -> str:
        return f"Schedule(first={sorted(self.first)}, second={sorted(self.second)})"


PartitionLike = Union[Schedule, Sequence[Collection[Label]]]
"""Input type for proposed partitions: a Schedule or any sequence of label groups."""


__all__ = [
    "Label",
    "Route",
    "Schedule",
    "PartitionLike",
]
