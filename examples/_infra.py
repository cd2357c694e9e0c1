from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(slots=True)
class Slider:
    value: Any = None

    def dispatch_event(self, name: str, *, bubbles: bool = False) -> None:
        print(f"  <input> {name} (bubbles={bubbles}) value={self.value}")


@dataclass(slots=True)
class Switch:
    label: str
    checked: bool = False

    def get_attribute(self, name: str) -> str | None:
        return ("true" if self.checked else "false") if name == "aria-checked" else None

    def click(self) -> None:
        self.checked = not self.checked
        print(f"  <switch {self.label}> clicked -> {self.checked}")


@dataclass(slots=True)
class SlowPage:
    """Page whose elements are rendered after a delay."""

    elements: dict[str, Any] = field(default_factory=dict)
    listeners: list[Callable[[], None]] = field(default_factory=list)

    def query_selector(self, selector: str) -> Any:
        return self.elements.get(selector)

    def observe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self.listeners.append(callback)
        return lambda: self.listeners.remove(callback)

    def render_later(self, delay_seconds: float, selector: str, element: Any) -> None:
        def render() -> None:
            self.elements[selector] = element
            for listener in list(self.listeners):
                listener()

        asyncio.get_running_loop().call_later(delay_seconds, render)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
