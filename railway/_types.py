"""
Core type definitions for railway.

Aliases shared by the waiter, the aggregator and the page collaborators.
"""

from __future__ import annotations

from collections.abc import Callable

from .outcome import Outcome

# ============================================================================
# Type aliases
# ============================================================================

# Thunk = zero-arg fallible operation handed to run_independent_tasks
type Thunk[V, E] = Callable[[], Outcome[V, E]]

# Probe = predicate over an external resource; None means "not yet"
type Probe[T] = Callable[[], T | None]

# Notify = callback the resource invokes after a batch of changes
type Notify = Callable[[], None]

# Unsubscribe = capability returned by Subscribe, releases the listener
type Unsubscribe = Callable[[], None]

# Subscribe = installs a Notify listener on the resource
type Subscribe = Callable[[Notify], Unsubscribe]

__all__ = (
    "Notify",
    "Probe",
    "Subscribe",
    "Thunk",
    "Unsubscribe",
)
