"""
Graph structure metrics.

Provides quantitative views of a graph that are independent of its store:
- Adjacency matrix: 0/1 numpy matrix in registration order
- Degrees: Out-degree and in-degree of every node
"""

from __future__ import annotations

from typing import cast

import numpy as np

from .base import Graph
from .types import Label


def adjacency_matrix(graph: Graph) -> tuple[list[Label], np.ndarray]:
    """
    Build the adjacency matrix of a graph.

    Args:
        graph: Graph to convert

    Returns:
        Tuple of (labels, matrix) where labels[i] names row and column i
        and matrix[i, j] is 1 if the edge labels[i] -> labels[j] exists.
        The matrix has dtype int8 and shape (n, n).

    Time Complexity: O(n^2) memory, O(n + m) fill
    """
    labels = list(graph)
    index = {label: i for i, label in enumerate(labels)}
    n = len(labels)

    A = np.zeros((n, n), dtype=np.int8)
    for i, label in enumerate(labels):
        for neighbor in graph.neighbors(label):
            A[i, index[neighbor]] = 1

    return labels, cast(np.ndarray, A)


def out_degrees(graph: Graph) -> dict[Label, int]:
    """
    Count outgoing edges per node.

    A self-edge counts once.
    """
    return {label: len(graph.neighbors(label)) for label in graph}


def in_degrees(graph: Graph) -> dict[Label, int]:
    """
    Count incoming edges per node.

    A self-edge counts once.
    """
    degrees = {label: 0 for label in graph}
    for label in degrees:
        for neighbor in graph.neighbors(label):
            degrees[neighbor] += 1
    return degrees


__all__ = [
    "adjacency_matrix",
    "out_degrees",
    "in_degrees",
]
