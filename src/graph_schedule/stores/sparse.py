"""
Sparse graph store.

Keeps one record per node; each record holds direct references to the
records of its out-neighbors, so stepping from a node to a neighbor is a
reference hop rather than a label lookup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from typing_extensions import Self

from ..base import Graph
from ..types import Label
from ..validation import DuplicateNodeError, UnknownNodeError, validate_label


class _Vertex:
    """Node record: a label and the records its outgoing edges point to."""

    __slots__ = ("label", "next_vertices")

    def __init__(self, label: Label) -> None:
        self.label = label
        self.next_vertices: list[_Vertex] = []

    def __repr__(self) -> str:
        return f"_Vertex({self.label!r}, out={len(self.next_vertices)})"


class SparseGraph(Graph):
    """
    Graph backed by adjacency lists of vertex records.

    The label -> record dict is the only owner of the records; records
    refer to one another but are never handed to callers, which only ever
    see labels. Adding an edge scans the source's neighbor list first, so
    re-adding an edge leaves the graph unchanged.

    Example:
        graph = SparseGraph("courses")
        graph.add_undirected_edge("math", "physics")
        graph.reaches_all_others("math")   # True
    """

    def __init__(self, name: str = "") -> None:
        """
        Initialize an empty sparse graph.

        Args:
            name: Descriptive graph name
        """
        super().__init__(name)
        self._vertices: dict[Label, _Vertex] = {}

    def add_node(self, label: Label) -> Self:
        validate_label(label)
        if label in self._vertices:
            raise DuplicateNodeError(label)
        self._add_node_unchecked(label)
        return self

    def add_directed_edge(self, source: Label, target: Label) -> Self:
        validate_label(source)
        validate_label(target)
        src = self._vertex_or_register(source)
        tgt = self._vertex_or_register(target)
        if tgt not in src.next_vertices:
            src.next_vertices.append(tgt)
        return self

    def _vertex_or_register(self, label: Label) -> _Vertex:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = self._add_node_unchecked(label)
        return vertex

    def _add_node_unchecked(self, label: Label) -> _Vertex:
        vertex = _Vertex(label)
        self._vertices[label] = vertex
        return vertex

    def count_self_edges(self) -> int:
        count = 0
        for label in self._vertices:
            if label in self.neighbors(label):
                count += 1
        return count

    def reaches_all_others(self, label: Label) -> bool:
        reached = set(self.neighbors(label))
        reached.add(label)
        return all(other in reached for other in self._vertices)

    def neighbors(self, label: Label) -> list[Label]:
        vertex = self._vertices.get(label)
        if vertex is None:
            raise UnknownNodeError(label)
        return [nxt.label for nxt in vertex.next_vertices]

    def all_nodes(self) -> set[Label]:
        return set(self._vertices)

    def __iter__(self) -> Iterator[Label]:
        return iter(list(self._vertices))

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices


__all__ = ["SparseGraph"]
