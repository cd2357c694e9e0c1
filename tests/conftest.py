"""Pytest configuration and fixtures.

Provides a fake live document whose elements can be added over time and
which notifies observers after every mutation batch, plus fake controls.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from railway import SELECTORS, SettingsStore

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeInput:
    """input[type=number] double recording dispatched events."""

    value: Any = None
    events: list[tuple[str, bool]] = field(default_factory=list)

    def dispatch_event(self, name: str, *, bubbles: bool = False) -> None:
        self.events.append((name, bubbles))


@dataclass
class FakeToggle:
    """button[role=switch] double tracking aria-checked and clicks."""

    checked: bool = False
    clicks: int = 0

    def get_attribute(self, name: str) -> str | None:
        if name != "aria-checked":
            return None
        return "true" if self.checked else "false"

    def click(self) -> None:
        self.clicks += 1
        self.checked = not self.checked


@dataclass
class FakeDocument:
    """Mutable page: query by selector, observe batched changes."""

    elements: dict[str, Any] = field(default_factory=dict)
    observe_calls: int = 0
    unsubscribe_calls: int = 0
    _listeners: list[Callable[[], None]] = field(default_factory=list)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def query_selector(self, selector: str) -> Any:
        return self.elements.get(selector)

    def observe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self.observe_calls += 1
        self._listeners.append(callback)

        def unsubscribe() -> None:
            self.unsubscribe_calls += 1
            self._listeners.remove(callback)

        return unsubscribe

    def mutate(self, **inserted: Any) -> None:
        """Insert elements by SELECTORS field name, then notify observers."""
        for name, element in inserted.items():
            self.elements[getattr(SELECTORS, name)] = element
        for listener in list(self._listeners):
            listener()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def document() -> FakeDocument:
    return FakeDocument()


@pytest.fixture
def populated_document() -> FakeDocument:
    """Document with every control already rendered (toggles off)."""
    doc = FakeDocument()
    doc.elements[SELECTORS.temperature_input] = FakeInput(value=1.0)
    doc.elements[SELECTORS.google_search_toggle] = FakeToggle(checked=False)
    doc.elements[SELECTORS.url_context_toggle] = FakeToggle(checked=False)
    return doc


@pytest.fixture
def store(tmp_path: Path) -> SettingsStore:
    return SettingsStore(tmp_path / "settings.json")
