"""
Collection operations
=====================

Aggregation over several outcomes:
- run_independent_tasks: run every thunk, accumulate every failure
- partition: split computed outcomes by variant
"""

from .independent import run_independent_tasks
from .partition import partition

__all__ = (
    "partition",
    "run_independent_tasks",
)
