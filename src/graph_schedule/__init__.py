"""
graph-schedule: Interchangeable graph stores with routing and scheduling.

This package provides one graph contract with two backing stores, plus
algorithms that work on either store through that contract alone.

Available components:
- stores: Dense (adjacency matrix) and sparse (adjacency list) graphs
- routing: Unweighted shortest routes by breadth-first search
- bipartite: Two-way conflict-free scheduling with odd-cycle detection
- preprocessing: Connected components
- metrics: Adjacency matrix and degree counts
"""

__version__ = "0.1.0"

# Abstract graph contract
from .base import Graph

# Two-way scheduling
from .bipartite import (
    compute_schedule,
    is_bipartite,
    validate_schedule,
)

# Structure metrics
from .metrics import (
    adjacency_matrix,
    in_degrees,
    out_degrees,
)

# Connectivity utilities
from .preprocessing import (
    connected_components,
    is_connected,
)

# Shortest routes
from .routing import (
    find_route,
    has_route,
    route_distances,
)

# Graph stores
from .stores import (
    DenseGraph,
    SparseGraph,
)
from .types import (
    Label,
    PartitionLike,
    Route,
    Schedule,
)

# Errors and warnings
from .validation import (
    DuplicateNodeError,
    GraphError,
    GraphStructureWarning,
    InvalidLabelError,
    NoRouteError,
    NoScheduleError,
    PerformanceWarning,
    UnknownNodeError,
)

__all__ = [
    # Version
    "__version__",
    # Contract
    "Graph",
    # Stores
    "DenseGraph",
    "SparseGraph",
    # Types
    "Label",
    "Route",
    "Schedule",
    "PartitionLike",
    # Routing
    "find_route",
    "has_route",
    "route_distances",
    # Scheduling
    "validate_schedule",
    "compute_schedule",
    "is_bipartite",
    # Connectivity
    "connected_components",
    "is_connected",
    # Metrics
    "adjacency_matrix",
    "out_degrees",
    "in_degrees",
    # Errors
    "GraphError",
    "InvalidLabelError",
    "DuplicateNodeError",
    "UnknownNodeError",
    "NoRouteError",
    "NoScheduleError",
    # Warnings
    "PerformanceWarning",
    "GraphStructureWarning",
]
