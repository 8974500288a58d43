"""
Graph stores.

Two interchangeable representations of the same graph contract:
- DenseGraph: Adjacency matrix over a stable label <-> index mapping
- SparseGraph: Adjacency lists of vertex records keyed by label

Both produce identical results for identical call sequences; neighbor
order is the only observable difference.
"""

from .dense import DenseGraph
from .sparse import SparseGraph

__all__ = [
    "DenseGraph",
    "SparseGraph",
]
