"""Feature-level fixtures for localization catalog tests.

Every fixture builds a fresh registry, there is no shared global state
between tests.
"""

import pytest

from localization import LocaleContext, LocaleRegistry, ResourceBinder
from tests.factories.localization import DE, EN, FR


@pytest.fixture
def registry():
    """Registry with EN as default and FR, DE registered."""
    registry = LocaleRegistry(default_locale=EN)
    registry.register_supported_locales(FR, DE)
    return registry


@pytest.fixture
def binder(registry):
    """Binder using the warn-and-overwrite duplicate policy."""
    return ResourceBinder(registry)


@pytest.fixture
def strict_binder(registry):
    """Binder rejecting re-declared resource names."""
    return ResourceBinder(registry, on_duplicate="error")


@pytest.fixture
def greeting(binder):
    """Translatable "greeting" resource with a French translation only."""
    return binder.declare_translatable("greeting", "Hello", {FR: "Bonjour"})


@pytest.fixture
def locale_context(registry):
    """LocaleContext over the shared registry fixture."""
    return LocaleContext(registry)


@pytest.fixture
def plural_forms():
    """Plural forms for a files counter in English and French."""
    return {
        "en": {"one": "{count} file", "other": "{count} files"},
        "fr": {"one": "{count} fichier", "many": "{count} de fichiers", "other": "{count} fichiers"},
    }
