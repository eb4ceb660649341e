import types

import core.config as core_config
import pytest
from core.config import LocalizationSettings


@pytest.fixture
def localization_settings(monkeypatch):
    """Provide test-controlled `settings.localization` values.

    Yields a small namespace with the active LocalizationSettings and a
    helper to replace it. The original `core.config.settings.localization`
    is restored after the test by monkeypatch.
    """
    current = LocalizationSettings(
        DEFAULT_LOCALE="en",
        SUPPORTED_LOCALES=[],
        DUPLICATE_RESOURCES="warn",
        FREEZE_AFTER_SETUP=True,
        _env_file=None,
    )
    monkeypatch.setattr(core_config.settings, "localization", current, raising=False)

    def set_values(**values):
        # Rebuild so field validators run on the new values
        merged = {**current_values(), **values}
        updated = LocalizationSettings(**merged, _env_file=None)
        monkeypatch.setattr(
            core_config.settings, "localization", updated, raising=False
        )
        return updated

    def current_values():
        return core_config.settings.localization.model_dump(by_alias=True)

    helper = types.SimpleNamespace(
        settings=current,
        set_values=set_values,
    )
    yield helper
