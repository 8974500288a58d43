"""
Base class for graph stores.

This module provides the abstract contract every graph store implements.
Algorithms in this package depend only on this contract, never on a
concrete store:

- Graph: Abstract base with node/edge mutation and neighbor queries
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import Label
from .validation import validate_name


class Graph(ABC):
    """
    Abstract base class for graph stores.

    A graph is a set of string-labelled nodes plus a set of directed,
    unweighted edges among them. Adding an edge whose endpoint is not yet
    registered registers that node first. An undirected edge is the pair of
    directed edges between two nodes.

    Subclasses hold all node/edge state; this class holds none and derives
    the Pythonic protocol (len, in, iteration) from the abstract methods.

    Example:
        graph = SparseGraph("labs")
        graph.add_node("lab 1")
        graph.add_undirected_edge("lab 1", "lab 2")

        graph.neighbors("lab 1")    # ['lab 2']
        "lab 2" in graph            # True
    """

    def __init__(self, name: str = "") -> None:
        """
        Initialize graph.

        Args:
            name: Descriptive name, not used by any algorithm
        """
        self._name = validate_name(name)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Get the graph name."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        """Set the graph name."""
        self._name = validate_name(value)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    @abstractmethod
    def add_node(self, label: Label) -> Self:
        """
        Register a new node with no edges.

        Raises:
            DuplicateNodeError: If label is already registered
            InvalidLabelError: If label is not a str
        """
        pass

    @abstractmethod
    def add_directed_edge(self, source: Label, target: Label) -> Self:
        """
        Add the edge source -> target.

        Missing endpoints are registered first. Adding an existing edge
        is a no-op.

        Raises:
            InvalidLabelError: If either label is not a str
        """
        pass

    def add_undirected_edge(self, a: Label, b: Label) -> Self:
        """Add the edges a -> b and b -> a."""
        self.add_directed_edge(a, b)
        self.add_directed_edge(b, a)
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @abstractmethod
    def count_self_edges(self) -> int:
        """Count the nodes n having the edge n -> n."""
        pass

    @abstractmethod
    def reaches_all_others(self, label: Label) -> bool:
        """
        Check whether a node has an edge to every other node.

        Self-edges do not matter.

        Raises:
            UnknownNodeError: If label is not registered
        """
        pass

    @abstractmethod
    def neighbors(self, label: Label) -> list[Label]:
        """
        Get the targets of a node's outgoing edges.

        The order is deterministic for a given store and call history.

        Raises:
            UnknownNodeError: If label is not registered
        """
        pass

    @abstractmethod
    def all_nodes(self) -> set[Label]:
        """Get a copy of the set of registered labels."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Label]:
        """Iterate over labels in registration order."""
        pass

    def __len__(self) -> int:
        return len(self.all_nodes())

    def __contains__(self, label: object) -> bool:
        return label in self.all_nodes()

    def has_edge(self, source: Label, target: Label) -> bool:
        """Check whether the edge source -> target is present."""
        if source not in self or target not in self:
            return False
        return target in self.neighbors(source)

    def edge_count(self) -> int:
        """Count directed edges (an undirected edge counts twice)."""
        return sum(len(self.neighbors(label)) for label in self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"nodes={len(self)}, edges={self.edge_count()})"
        )


__all__ = ["Graph"]
