"""
Lift helpers.

Import style:
    from railway import lift as L

Architecture:
- L.up.*    - подъем значений в Outcome
- L.down.*  - опускание Outcome в kungfu Result

Examples:
    from railway import lift as L

    control = L.optional(document.query_selector(sel), error=lambda: NotFound(sel))
    parsed = L.catching(lambda: json.loads(raw), on_error=lambda e: SettingsError(str(e)))
    found = await L.settle(wait_for_control(document, sel), on_error=...)
    outcome = L.from_result(kungfu_result)
    result = L.to_result(outcome)
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .up import catching, from_result, optional, settle
from .down import to_result

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "catching",
    "from_result",
    "optional",
    "settle",
    # Down
    "to_result",
)
