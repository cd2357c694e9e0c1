"""
Independent tasks
=================

Fan-out/gather over independent fallible steps with error accumulation.
"""

from __future__ import annotations

from collections.abc import Sequence

from .._types import Thunk
from ..outcome import Outcome, err, ok
from .partition import partition


def run_independent_tasks[V, E](
    tasks: Sequence[Thunk[V, E]],
) -> Outcome[list[V], list[E]]:
    """
    Run all, collect ALL errors (not fail-fast).

    Every task is invoked exactly once, in order, whatever earlier tasks
    returned. Failures come back in task order; successes are dropped from
    a failed aggregate.

    Example:
        run_independent_tasks([lambda: ok(1), lambda: err("a"), lambda: err("b")])
        # Failure(['a', 'b'])
    """
    outcomes: list[Outcome[V, E]] = [task() for task in tasks]
    successes, failures = partition(outcomes)

    if failures:
        return err(failures)
    return ok(successes)


__all__ = ("run_independent_tasks",)
