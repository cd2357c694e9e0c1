"""
Page controls
=============

Lookup and manipulation of the target page's form controls. The page is
reached through the Document protocol, so any driver that can query a
selector and report batched DOM changes can back it.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable

from ._errors import ControlNotFoundError
from ._types import Unsubscribe
from .lift import optional
from .outcome import Outcome, ok
from .wait import wait_until

logger = logging.getLogger(__name__)


class Control(typing.Protocol):
    """Any element handle returned by a Document."""


class InputControl(Control, typing.Protocol):
    """input[type=number] or input[type=range]."""

    value: typing.Any

    def dispatch_event(self, name: str, *, bubbles: bool = ...) -> None: ...


class ToggleControl(Control, typing.Protocol):
    """button[role=switch]."""

    def get_attribute(self, name: str) -> str | None: ...

    def click(self) -> None: ...


class Document(typing.Protocol):
    """A live page: selector lookup plus change notifications."""

    def query_selector(self, selector: str) -> Control | None: ...

    def observe(self, callback: Callable[[], None]) -> Unsubscribe:
        """Call callback after each batch of subtree changes until unsubscribed."""
        ...


class Selectors(typing.NamedTuple):
    temperature_slider: str
    temperature_input: str
    google_search_toggle: str
    url_context_toggle: str


SELECTORS = Selectors(
    temperature_slider='[data-test-id="temperatureSliderContainer"] input[type="range"]',
    temperature_input='[data-test-id="temperatureSliderContainer"] input[type="number"]',
    google_search_toggle='[data-test-id="searchAsAToolTooltip"] button[role="switch"]',
    url_context_toggle='[data-test-id="browseAsAToolTooltip"] button[role="switch"]',
)


def find_control(document: Document, selector: str) -> Outcome[Control, ControlNotFoundError]:
    """Look the control up once, without waiting."""
    return optional(
        document.query_selector(selector),
        error=lambda: ControlNotFoundError(selector),
    )


def wait_for_control(document: Document, selector: str) -> asyncio.Future[Control]:
    """Resolve once selector matches an element. Pending until it does."""
    logger.debug("Waiting for control %s", selector)
    return wait_until(lambda: document.query_selector(selector), document.observe)


def apply_input_value[C: InputControl](control: C, value: float) -> Outcome[C, typing.Never]:
    """
    Set a numeric input's value.

    Frameworks such as React track input state themselves; assigning value
    alone is not seen, so a bubbling "input" event follows.
    """
    control.value = value
    control.dispatch_event("input", bubbles=True)
    return ok(control)


def apply_toggle_state[C: ToggleControl](control: C, enabled: bool) -> Outcome[C, typing.Never]:
    """Click the switch only when aria-checked differs from enabled."""
    currently_enabled = control.get_attribute("aria-checked") == "true"
    if currently_enabled != enabled:
        control.click()
    return ok(control)


__all__ = (
    "Control",
    "Document",
    "InputControl",
    "SELECTORS",
    "Selectors",
    "ToggleControl",
    "apply_input_value",
    "apply_toggle_state",
    "find_control",
    "wait_for_control",
)
