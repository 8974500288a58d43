"""
Error taxonomy and input validation for graph stores and algorithms.

Provides the exception hierarchy raised across the package, the warning
categories it issues, and small validation helpers shared by the stores.
"""

from __future__ import annotations

from typing import Any, Optional


class GraphError(ValueError):
    """Base exception for graph errors."""

    pass


class InvalidLabelError(GraphError):
    """Raised when a node label is not a string."""

    pass


class DuplicateNodeError(GraphError):
    """Raised when a node is explicitly registered under an existing label."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Node {label!r} already exists")
        self.label = label


class UnknownNodeError(GraphError, KeyError):
    """Raised when a query names a label that is not registered."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Node {label!r} is not in the graph")
        self.label = label

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class NoRouteError(GraphError):
    """Raised when no directed path connects two nodes."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"No route from {source!r} to {target!r}")
        self.source = source
        self.target = target


class NoScheduleError(GraphError):
    """Raised when a conflict graph admits no two-way schedule."""

    def __init__(self, label: Optional[str] = None) -> None:
        if label is None:
            msg = "Graph is not bipartite; no two-way schedule exists"
        else:
            msg = f"Graph is not bipartite; node {label!r} conflicts with its own group"
        super().__init__(msg)
        self.label = label


class PerformanceWarning(UserWarning):
    """Warning about performance-related issues."""

    pass


class GraphStructureWarning(UserWarning):
    """Warning issued when graph structure doesn't match algorithm assumptions."""

    pass


def validate_label(label: Any) -> str:
    """
    Validate that a node label is a string.

    Args:
        label: Candidate label

    Returns:
        The label unchanged

    Raises:
        InvalidLabelError: If label is not a str
    """
    if not isinstance(label, str):
        raise InvalidLabelError(f"Node label must be a str, got {type(label).__name__}")
    return label


def validate_name(name: Any) -> str:
    """
    Validate a graph name.

    Raises:
        GraphError: If name is not a str
    """
    if not isinstance(name, str):
        raise GraphError(f"Graph name must be a str, got {type(name).__name__}")
    return name


def validate_size_warning(threshold: Optional[int]) -> Optional[int]:
    """
    Validate a node-count warning threshold.

    Args:
        threshold: Node count above which to warn, or None to disable

    Returns:
        Validated threshold

    Raises:
        GraphError: If threshold is negative
    """
    if threshold is None:
        return None
    if threshold < 0:
        raise GraphError(f"size_warning must be >= 0, got {threshold}")
    return int(threshold)


__all__ = [
    "GraphError",
    "InvalidLabelError",
    "DuplicateNodeError",
    "UnknownNodeError",
    "NoRouteError",
    "NoScheduleError",
    "PerformanceWarning",
    "GraphStructureWarning",
    "validate_label",
    "validate_name",
    "validate_size_warning",
]
