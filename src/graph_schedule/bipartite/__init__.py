"""
Bipartite scheduling.

Splits the nodes of a conflict graph into two groups so that no edge
joins two nodes of the same group.

Common use cases:
- Lab or exam sessions that cannot share a time slot
- Two-shift staffing with incompatible pairs
- Odd-cycle detection
"""

from .schedule import compute_schedule, is_bipartite, validate_schedule

__all__ = [
    "validate_schedule",
    "compute_schedule",
    "is_bipartite",
]
