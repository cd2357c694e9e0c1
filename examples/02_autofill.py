from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from _infra import SlowPage, Slider, Switch, banner, run

from railway import SELECTORS, AutofillConfig, Settings, SettingsStore, apply_settings


async def main() -> None:
    banner("02_autofill: wait for late controls, apply settings, report")
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    store = SettingsStore(Path(tempfile.mkdtemp()) / "settings.json")
    store.save(Settings(temperature=0.3, enable_google_search=False, enable_url_context=True))

    page = SlowPage()
    page.render_later(0.05, SELECTORS.temperature_input, Slider(value=1.0))
    page.render_later(0.10, SELECTORS.google_search_toggle, Switch("search", checked=True))
    # URL context toggle never renders: reported after the timeout.

    outcome = await apply_settings(page, store, config=AutofillConfig(wait_timeout_seconds=0.5))
    print(f"success={outcome.is_success()}")


if __name__ == "__main__":
    run(main)
