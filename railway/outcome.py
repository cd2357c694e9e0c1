"""
Outcome
=======

Railway-oriented result of a fallible computation:

- Success[V] carries the value
- Failure[E] carries the error

Outcome[V, E] is a closed union of exactly these two variants. There is no
base class to instantiate; build values through ``ok`` and ``err``.

Laws:
- Functor identity: ok(v).map(f) == ok(f(v)); err(e).map(f) is err(e)
- Left identity: ok(v).and_then(f) == f(v)
- Failure short-circuit: err(e).and_then(f) is err(e)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._errors import UnwrapError


@dataclass(frozen=True, slots=True)
class Success[V]:
    """Successful variant of Outcome."""

    value: V

    def is_success(self) -> typing.Literal[True]:
        return True

    def is_failure(self) -> typing.Literal[False]:
        return False

    # Functor operations

    def map[U](self, f: Callable[[V], U], /) -> Success[U]:
        """Apply f to the value."""
        return Success(f(self.value))

    def map_err(self, f: Callable[[typing.Any], typing.Any], /) -> Success[V]:
        _ = f
        return self

    # Monad operations

    def and_then[U, E](self, f: Callable[[V], Outcome[U, E]], /) -> Outcome[U, E]:
        """
        Monadic bind (>>=).

        Returns f(value) as is, so the outcome is flattened, not nested.
        """
        return f(self.value)

    # Effects

    def tap(self, f: Callable[[V], None], /) -> Success[V]:
        """Run side effect on the value, return self unchanged."""
        f(self.value)
        return self

    def tap_err(self, f: Callable[[typing.Any], None], /) -> Success[V]:
        _ = f
        return self

    # Extraction

    def unwrap(self) -> V:
        return self.value

    def unwrap_or[D](self, default: D, /) -> V:
        _ = default
        return self.value

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """Failed variant of Outcome."""

    error: E

    def is_success(self) -> typing.Literal[False]:
        return False

    def is_failure(self) -> typing.Literal[True]:
        return True

    # Functor operations

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> Failure[E]:
        _ = f
        return self

    def map_err[F](self, f: Callable[[E], F], /) -> Failure[F]:
        """Apply f to the error."""
        return Failure(f(self.error))

    # Monad operations

    def and_then(self, f: Callable[[typing.Any], typing.Any], /) -> Failure[E]:
        """Short-circuit: f is never called."""
        _ = f
        return self

    # Effects

    def tap(self, f: Callable[[typing.Any], None], /) -> Failure[E]:
        _ = f
        return self

    def tap_err(self, f: Callable[[E], None], /) -> Failure[E]:
        """Run side effect on the error, return self unchanged."""
        f(self.error)
        return self

    # Extraction

    def unwrap(self) -> typing.Never:
        """
        Raise the stored error.

        Exceptions are raised as is. Any other payload is carried by
        UnwrapError, since only exceptions can be raised.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def unwrap_or[D](self, default: D, /) -> D:
        return default

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


type Outcome[V, E] = Success[V] | Failure[E]


# Convenience Constructors
def ok[V](value: V) -> Success[V]:
    """Create successful Outcome."""
    return Success(value)


def err[E](error: E) -> Failure[E]:
    """Create failed Outcome."""
    return Failure(error)


__all__ = (
    "Failure",
    "Outcome",
    "Success",
    "err",
    "ok",
)
