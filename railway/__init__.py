"""
Railway-oriented outcomes for browser automation.

Core building blocks:
- Outcome (Success / Failure) with chainable transformations
- run_independent_tasks: run every fallible step, collect every failure
- wait_until: resolve when a condition over a mutating resource first holds

On top of them, a settings autofill helper that applies stored preferences
to a page whose controls may be slow to appear or missing.
"""

import logging

# Core types
from ._types import Notify, Probe, Subscribe, Thunk, Unsubscribe
from .outcome import Failure, Outcome, Success, err, ok

# Lift helpers
from . import lift
from .lift import catching, from_result, optional, settle, to_result

# Collection operations
from .collection import partition, run_independent_tasks

# Wait operations
from .wait import wait_until

# Page controls
from .page import (
    SELECTORS,
    Control,
    Document,
    InputControl,
    ToggleControl,
    apply_input_value,
    apply_toggle_state,
    find_control,
    wait_for_control,
)

# Settings
from .settings import DEFAULT_SETTINGS, Settings, SettingsStore, load_settings, save_settings

# Autofill
from .autofill import AutofillConfig, apply_settings

# Errors
from ._errors import (
    ConfigurationError,
    ControlNotFoundError,
    RailwayError,
    SettingsError,
    UnwrapError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Notify",
    "Probe",
    "Subscribe",
    "Thunk",
    "Unsubscribe",
    # Outcome
    "Failure",
    "Outcome",
    "Success",
    "err",
    "ok",
    # Lift
    "lift",
    "catching",
    "from_result",
    "optional",
    "settle",
    "to_result",
    # Collection
    "partition",
    "run_independent_tasks",
    # Wait
    "wait_until",
    # Page
    "SELECTORS",
    "Control",
    "Document",
    "InputControl",
    "ToggleControl",
    "apply_input_value",
    "apply_toggle_state",
    "find_control",
    "wait_for_control",
    # Settings
    "DEFAULT_SETTINGS",
    "Settings",
    "SettingsStore",
    "load_settings",
    "save_settings",
    # Autofill
    "AutofillConfig",
    "apply_settings",
    # Errors
    "ConfigurationError",
    "ControlNotFoundError",
    "RailwayError",
    "SettingsError",
    "UnwrapError",
)
