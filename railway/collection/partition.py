"""Partition combinators

Split computed outcomes into successes and failures."""

from __future__ import annotations

from collections.abc import Iterable

from ..outcome import Failure, Outcome, Success


def partition[V, E](outcomes: Iterable[Outcome[V, E]]) -> tuple[list[V], list[E]]:
    """Separate into (successes, failures), each in input order. Never fails."""
    successes: list[V] = []
    failures: list[E] = []

    for o in outcomes:
        match o:
            case Success(value):
                successes.append(value)
            case Failure(error):
                failures.append(error)

    return successes, failures


__all__ = ("partition",)
