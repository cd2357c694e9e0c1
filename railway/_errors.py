from __future__ import annotations

import typing


class RailwayError(Exception):
    """Base exception for railway errors."""


class UnwrapError(RailwayError):
    """unwrap() called on a Failure whose error is not an exception."""

    error: typing.Any

    def __init__(self, error: typing.Any) -> None:
        self.error = error
        super().__init__(f"Called unwrap() on Failure({error!r})")


class ControlNotFoundError(RailwayError):
    """Page control matching selector is unavailable."""

    selector: str

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Control '{selector}' not found")


class SettingsError(RailwayError):
    """Settings could not be read or written."""

    path: str | None

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigurationError(RailwayError):
    """Invalid autofill configuration."""


__all__ = (
    "ConfigurationError",
    "ControlNotFoundError",
    "RailwayError",
    "SettingsError",
    "UnwrapError",
)
