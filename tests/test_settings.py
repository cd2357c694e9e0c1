"""Settings record and JSON file store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from railway import (
    DEFAULT_SETTINGS,
    Settings,
    SettingsError,
    SettingsStore,
    load_settings,
    ok,
    save_settings,
)
from railway.settings import SETTINGS_PATH_ENV

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    assert DEFAULT_SETTINGS == Settings(
        temperature=0.7, enable_google_search=True, enable_url_context=True
    )


def test_missing_file_loads_defaults(store: SettingsStore) -> None:
    assert store.load() == ok(DEFAULT_SETTINGS)


def test_stored_keys_overlay_defaults(store: SettingsStore) -> None:
    store.path.write_text(json.dumps({"temperature": 1, "extra": "ignored"}), encoding="utf-8")

    settings = store.load().unwrap()

    assert settings == Settings(temperature=1.0)
    assert isinstance(settings.temperature, float)


def test_save_then_load(store: SettingsStore) -> None:
    wanted = Settings(temperature=0.2, enable_google_search=False, enable_url_context=True)

    assert store.save(wanted) == ok(True)
    assert store.load() == ok(wanted)


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "nested" / "dir" / "settings.json")
    assert save_settings(Settings(), store).is_success()
    assert store.path.exists()


@pytest.mark.parametrize(
    "payload",
    ["{not json", "[1, 2]", '{"enable_url_context": "yes"}', '{"temperature": "hot"}'],
)
def test_invalid_file_is_failure(
    store: SettingsStore, payload: str, caplog: pytest.LogCaptureFixture
) -> None:
    store.path.write_text(payload, encoding="utf-8")

    with caplog.at_level("ERROR", logger="railway.settings"):
        outcome = load_settings(store)

    assert outcome.is_failure()
    with pytest.raises(SettingsError) as exc_info:
        outcome.unwrap()
    assert exc_info.value.path == str(store.path)
    assert "Failed to load settings" in caplog.text


def test_save_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    store = SettingsStore(blocker / "settings.json")

    outcome = store.save(Settings())

    assert outcome.is_failure()
    assert outcome.unwrap_or(False) is False


def test_default_store_uses_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv(SETTINGS_PATH_ENV, str(tmp_path / "custom.json"))
    assert SettingsStore.default().path == tmp_path / "custom.json"


def test_default_store_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SETTINGS_PATH_ENV, raising=False)
    path = SettingsStore.default().path
    assert path.parts[-3:] == (".config", "railway", "settings.json")
    assert path.is_absolute()
