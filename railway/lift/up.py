"""
Подъем значений в Outcome.

Функции для преобразования Optional, exception-based кода, awaitable и
kungfu Result в Outcome.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from ..outcome import Outcome, err, ok


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Outcome[T, E]:
    """
    Convert Optional to Outcome. None becomes err(error()).

    **When to use:** DOM lookups, cache checks, config reads - anywhere
    you get Optional and need to convert None to an error.

    Example:
        from railway import lift as L

        def find_control(document, selector):
            return L.optional(
                document.query_selector(selector),
                error=lambda: ControlNotFoundError(selector),
            )

    NOTE: error is a thunk (zero-arg callable) to avoid computing
          error message when value is present.
    """
    if value is None:
        return err(error())
    return ok(value)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Outcome[T, E]:
    """
    Execute sync thunk, catch exceptions and convert to Failure.

    **When to use:** Bridge between exception-based code and Outcome.

    Example:
        import json
        from railway import lift as L

        L.catching(lambda: json.loads(raw), on_error=lambda e: ParseError(str(e)))

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """
    try:
        return ok(thunk())
    except Exception as exc:
        return err(on_error(exc))


async def settle[T, E](
    awaitable: Awaitable[T],
    *,
    on_error: Callable[[Exception], E],
) -> Outcome[T, E]:
    """
    Await, wrap the value in ok() and any exception in err().

    Example:
        from railway import lift as L

        control = await L.settle(
            wait_for_control(document, selector),
            on_error=lambda e: ControlNotFoundError(selector),
        )

    NOTE: asyncio.CancelledError is not an Exception and propagates.
    """
    try:
        return ok(await awaitable)
    except Exception as exc:
        return err(on_error(exc))


def from_result[T, E](value: Result[T, E]) -> Outcome[T, E]:
    """
    Lift a kungfu Result into Outcome.

    Example:
        from kungfu import Ok
        from railway import lift as L

        L.from_result(Ok(42))  # Success(42)
    """
    match value:
        case Ok(v):
            return ok(v)
        case Error(e):
            return err(e)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "catching",
    "from_result",
    "optional",
    "settle",
)
