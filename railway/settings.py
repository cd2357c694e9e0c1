"""Persisted user settings: record, defaults and a JSON file store."""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ._errors import SettingsError
from .lift import catching
from .outcome import Outcome, ok

logger = logging.getLogger(__name__)

SETTINGS_PATH_ENV = "RAILWAY_SETTINGS_PATH"
_DEFAULT_PATH = Path("~/.config/railway/settings.json")


@dataclass(frozen=True, slots=True)
class Settings:
    """Preferences applied to the page."""

    temperature: float = 0.7
    enable_google_search: bool = True
    enable_url_context: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Settings:
        """Overlay stored keys on the defaults. Unknown keys are ignored."""
        known = {f.name for f in dataclasses.fields(cls)}
        merged = dataclasses.asdict(cls()) | {k: v for k, v in data.items() if k in known}

        for name in ("enable_google_search", "enable_url_context"):
            if not isinstance(merged[name], bool):
                raise TypeError(f"{name} must be a boolean, got {merged[name]!r}")

        return cls(
            temperature=float(merged["temperature"]),
            enable_google_search=merged["enable_google_search"],
            enable_url_context=merged["enable_url_context"],
        )

    def to_mapping(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


DEFAULT_SETTINGS = Settings()


@dataclass(frozen=True, slots=True)
class SettingsStore:
    """Settings kept as a JSON object in a single file."""

    path: Path

    @classmethod
    def default(cls) -> SettingsStore:
        """Use $RAILWAY_SETTINGS_PATH, else ~/.config/railway/settings.json."""
        raw = os.environ.get(SETTINGS_PATH_ENV)
        path = Path(raw) if raw else _DEFAULT_PATH
        return cls(path.expanduser())

    def load(self) -> Outcome[Settings, SettingsError]:
        """Read settings. A missing file yields the defaults."""
        return catching(
            self._read,
            on_error=lambda exc: SettingsError(
                f"Failed to load settings from {self.path}: {exc}",
                path=str(self.path),
            ),
        ).tap_err(lambda e: logger.error("%s", e))

    def save(self, settings: Settings) -> Outcome[bool, SettingsError]:
        return catching(
            lambda: self._write(settings),
            on_error=lambda exc: SettingsError(
                f"Failed to save settings to {self.path}: {exc}",
                path=str(self.path),
            ),
        ).tap_err(lambda e: logger.error("%s", e))

    def _read(self) -> Settings:
        if not self.path.exists():
            logger.debug("No settings file at %s, using defaults", self.path)
            return DEFAULT_SETTINGS

        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return Settings.from_mapping(data)

    def _write(self, settings: Settings) -> bool:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings.to_mapping(), indent=2), encoding="utf-8")
        logger.debug("Saved settings to %s", self.path)
        return True


def load_settings(store: SettingsStore | None = None) -> Outcome[Settings, SettingsError]:
    return (store or SettingsStore.default()).load()


def save_settings(
    settings: Settings,
    store: SettingsStore | None = None,
) -> Outcome[bool, SettingsError]:
    return (store or SettingsStore.default()).save(settings)


__all__ = (
    "DEFAULT_SETTINGS",
    "SETTINGS_PATH_ENV",
    "Settings",
    "SettingsStore",
    "load_settings",
    "save_settings",
)
