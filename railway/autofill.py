"""
Autofill
========

Apply stored settings to the page:

1. wait for each control to appear
2. load settings
3. apply every setting independently, collecting every failure
4. log a summary
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ._errors import ConfigurationError, ControlNotFoundError, RailwayError
from .collection import run_independent_tasks
from .lift import settle
from .outcome import Outcome
from .page import (
    SELECTORS,
    Control,
    Document,
    apply_input_value,
    apply_toggle_state,
    wait_for_control,
)
from .settings import Settings, SettingsStore, load_settings

logger = logging.getLogger(__name__)

_CONTROL_SELECTORS = (
    SELECTORS.temperature_input,
    SELECTORS.google_search_toggle,
    SELECTORS.url_context_toggle,
)


@dataclass(frozen=True, slots=True)
class AutofillConfig:
    """Configuration for apply_settings."""

    #: None waits for controls indefinitely.
    wait_timeout_seconds: float | None = None
    #: Await controls one after another instead of all at once.
    sequential: bool = False

    def __post_init__(self) -> None:
        if self.wait_timeout_seconds is not None and self.wait_timeout_seconds <= 0.0:
            raise ConfigurationError("AutofillConfig.wait_timeout_seconds must be > 0")


async def _settle_control(
    pending: asyncio.Future[Control],
    selector: str,
    timeout: float | None,
) -> Outcome[Control, ControlNotFoundError]:
    awaitable = pending if timeout is None else asyncio.wait_for(pending, timeout)
    return await settle(awaitable, on_error=lambda _: ControlNotFoundError(selector))


async def _gather_controls(
    document: Document,
    config: AutofillConfig,
) -> list[Outcome[Control, ControlNotFoundError]]:
    timeout = config.wait_timeout_seconds

    if config.sequential:
        return [
            await _settle_control(wait_for_control(document, selector), selector, timeout)
            for selector in _CONTROL_SELECTORS
        ]

    # Every listener is installed before the first await.
    pending = [wait_for_control(document, selector) for selector in _CONTROL_SELECTORS]
    return list(
        await asyncio.gather(
            *(
                _settle_control(future, selector, timeout)
                for future, selector in zip(pending, _CONTROL_SELECTORS, strict=True)
            )
        )
    )


def _apply(
    settings: Settings,
    controls: Sequence[Outcome[Control, ControlNotFoundError]],
) -> Outcome[list[Control], list[RailwayError]]:
    temperature, search, url_context = controls
    return run_independent_tasks(
        [
            lambda: temperature.and_then(lambda c: apply_input_value(c, settings.temperature)),
            lambda: search.and_then(lambda c: apply_toggle_state(c, settings.enable_google_search)),
            lambda: url_context.and_then(lambda c: apply_toggle_state(c, settings.enable_url_context)),
        ]
    )


def _report_failures(errors: list[RailwayError]) -> None:
    logger.warning("Some settings could not be applied:")
    for error in errors:
        logger.warning("- %s", error)


async def apply_settings(
    document: Document,
    store: SettingsStore | None = None,
    *,
    config: AutofillConfig = AutofillConfig(),
) -> Outcome[list[Control], list[RailwayError]]:
    """
    Wait for the page controls, then apply stored settings to them.

    Success holds the touched controls in order (temperature input, Google
    Search toggle, URL context toggle). Failure holds every error: one
    ControlNotFoundError per missing control, or the single SettingsError
    when settings could not be loaded.

    Example:
        outcome = await apply_settings(document, config=AutofillConfig(wait_timeout_seconds=10))
        if outcome.is_failure():
            ...
    """
    logger.info("Waiting for page controls")
    controls = await _gather_controls(document, config)

    return (
        load_settings(store)
        .map_err(lambda e: [e])
        .and_then(lambda settings: _apply(settings, controls))
        .tap(lambda applied: logger.info("All %d settings applied", len(applied)))
        .tap_err(_report_failures)
    )


__all__ = (
    "AutofillConfig",
    "apply_settings",
)
