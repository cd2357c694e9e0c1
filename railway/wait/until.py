"""
Condition waiter
================

Resolve a future once a probe over a mutating external resource yields a
value. The probe runs once up front, then again on every change
notification until it succeeds.
"""

from __future__ import annotations

import asyncio

from .._types import Probe, Subscribe, Unsubscribe


class _Subscription:
    """Listener lifetime: attached at most once, released exactly once."""

    __slots__ = ("_unsubscribe", "_closed")

    def __init__(self) -> None:
        self._unsubscribe: Unsubscribe | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def attach(self, unsubscribe: Unsubscribe) -> None:
        # Source notified synchronously from inside subscribe() and the
        # waiter already resolved: release the handle right away.
        if self._closed:
            unsubscribe()
            return
        self._unsubscribe = unsubscribe

    def release(self) -> None:
        if self._closed:
            return
        self._closed = True
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()


def wait_until[T](probe: Probe[T], subscribe: Subscribe) -> asyncio.Future[T]:
    """
    Wait until probe() returns something other than None.

    - Already satisfied: the future is resolved before returning and
      subscribe is never called.
    - Pending: subscribe(notify) installs one listener. The first notify
      that finds a value unsubscribes, then resolves the future.
    - Never satisfied: the future stays pending. There is no timeout; wrap
      it in asyncio.wait_for if you need one. Cancelling the future
      releases the listener.

    Must be called with a running event loop.

    Example:
        control = await wait_until(
            lambda: document.query_selector("#save"),
            document.observe,
        )
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[T] = loop.create_future()

    value = probe()
    if value is not None:
        future.set_result(value)
        return future

    subscription = _Subscription()

    def notify() -> None:
        if subscription.closed or future.done():
            return
        found = probe()
        if found is None:
            return
        subscription.release()
        future.set_result(found)

    def on_done(_: asyncio.Future[T]) -> None:
        subscription.release()

    future.add_done_callback(on_done)
    subscription.attach(subscribe(notify))
    return future


__all__ = ("wait_until",)
