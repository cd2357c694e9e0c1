"""
Опускание Outcome в kungfu Result.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok, Result

from ..outcome import Failure, Outcome, Success


def to_result[T, E](outcome: Outcome[T, E]) -> Result[T, E]:
    """
    Convert Outcome into kungfu Result.

    **When to use:** Handing an Outcome to code built on kungfu
    combinators (LazyCoroResult pipelines, retry, timeout).

    Example:
        from railway import lift as L, ok

        L.to_result(ok(42))  # Ok(42)
    """
    match outcome:
        case Success(value):
            return Ok(value)
        case Failure(error):
            return Error(error)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ("to_result",)
