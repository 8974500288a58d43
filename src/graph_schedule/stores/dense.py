"""
Dense graph store.

Keeps a square matrix of booleans indexed by a position assigned to each
node at registration time. Index lookups make the self-edge count and the
reaches-all-others check linear in the number of nodes.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from ..base import Graph
from ..types import Label
from ..validation import (
    DuplicateNodeError,
    PerformanceWarning,
    UnknownNodeError,
    validate_label,
    validate_size_warning,
)


class DenseGraph(Graph):
    """
    Graph backed by an adjacency matrix.

    Node i owns row i and column i of the matrix. Indices increase
    monotonically and are never reused, so the label <-> index maps stay
    valid for the lifetime of the graph. Registering a node appends one
    row and grows every existing row by one cell, which costs time linear
    in the current node count and keeps memory quadratic.

    Example:
        graph = DenseGraph("rooms", size_warning=None)
        graph.add_directed_edge("a", "b")
        graph.neighbors("a")   # ['b']

    Attributes:
        name: Descriptive graph name
        size_warning: Node count above which a PerformanceWarning is issued
    """

    def __init__(self, name: str = "", *, size_warning: Optional[int] = 5000) -> None:
        """
        Initialize an empty dense graph.

        Args:
            name: Descriptive graph name
            size_warning: Node count above which to warn once about the
                quadratic matrix, or None to never warn
        """
        super().__init__(name)
        self._matrix: list[list[bool]] = []
        self._label_to_index: dict[Label, int] = {}
        self._index_to_label: dict[int, Label] = {}
        self._size_warning = validate_size_warning(size_warning)
        self._warned = False

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def size_warning(self) -> Optional[int]:
        """Get the node count warning threshold."""
        return self._size_warning

    @size_warning.setter
    def size_warning(self, value: Optional[int]) -> None:
        """Set the node count warning threshold."""
        self._size_warning = validate_size_warning(value)
        self._warned = False

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_node(self, label: Label) -> Self:
        validate_label(label)
        if label in self._label_to_index:
            raise DuplicateNodeError(label)
        self._add_node_unchecked(label, stacklevel=3)
        return self

    def add_directed_edge(self, source: Label, target: Label) -> Self:
        validate_label(source)
        validate_label(target)
        src = self._index_or_register(source)
        tgt = self._index_or_register(target)
        self._matrix[src][tgt] = True
        return self

    def add_undirected_edge(self, a: Label, b: Label) -> Self:
        validate_label(a)
        validate_label(b)
        i = self._index_or_register(a)
        j = self._index_or_register(b)
        self._matrix[i][j] = True
        self._matrix[j][i] = True
        return self

    def _index_or_register(self, label: Label) -> int:
        index = self._label_to_index.get(label)
        if index is None:
            index = self._add_node_unchecked(label, stacklevel=4)
        return index

    def _add_node_unchecked(self, label: Label, stacklevel: int) -> int:
        """
        Append a row and a column for a label known to be new.

        stacklevel is counted from this method so the size warning lands
        on the line that called the public mutator.
        """
        index = len(self._matrix)
        for row in self._matrix:
            row.append(False)
        self._matrix.append([False] * (index + 1))

        self._label_to_index[label] = index
        self._index_to_label[index] = label

        if (
            self._size_warning is not None
            and not self._warned
            and len(self._matrix) > self._size_warning
        ):
            self._warned = True
            warnings.warn(
                f"DenseGraph {self.name!r} has grown past {self._size_warning} nodes; "
                "memory is quadratic in node count. Consider SparseGraph.",
                PerformanceWarning,
                stacklevel=stacklevel,
            )

        return index

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def count_self_edges(self) -> int:
        return sum(1 for i, row in enumerate(self._matrix) if row[i])

    def reaches_all_others(self, label: Label) -> bool:
        index = self._index(label)
        row = self._matrix[index]
        for i, present in enumerate(row):
            if i != index and not present:
                return False
        return True

    def neighbors(self, label: Label) -> list[Label]:
        row = self._matrix[self._index(label)]
        return [self._index_to_label[i] for i, present in enumerate(row) if present]

    def all_nodes(self) -> set[Label]:
        return set(self._label_to_index)

    def has_edge(self, source: Label, target: Label) -> bool:
        src = self._label_to_index.get(source)
        tgt = self._label_to_index.get(target)
        if src is None or tgt is None:
            return False
        return self._matrix[src][tgt]

    def _index(self, label: Label) -> int:
        try:
            return self._label_to_index[label]
        except KeyError:
            raise UnknownNodeError(label) from None

    def __iter__(self) -> Iterator[Label]:
        # Indices are dense and never reused, so index order is registration order
        return (self._index_to_label[i] for i in range(len(self._matrix)))

    def __len__(self) -> int:
        return len(self._matrix)

    def __contains__(self, label: object) -> bool:
        return label in self._label_to_index


__all__ = ["DenseGraph"]
