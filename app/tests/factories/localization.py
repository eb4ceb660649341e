"""Test data factories for localization catalog testing.

Provides deterministic test data builders for:
- Locale
- Catalog
- PluralResource
- LocaleRegistry / ResourceBinder
"""

from typing import Iterable, Optional

from localization import (
    Catalog,
    Locale,
    LocaleRegistry,
    PluralResource,
    ResourceBinder,
)

EN = Locale("en")
FR = Locale("fr")
DE = Locale("de")
ES = Locale("es")


def make_locale(language: str = "fr", region: str = "", script: str = "") -> Locale:
    """Create a Locale instance.

    Args:
        language: Language code.
        region: Region code, empty for none.
        script: Script code, empty for none.

    Returns:
        Locale instance.
    """
    return Locale(language=language, region=region, script=script)


def make_catalog(
    locale: Locale = FR,
    strings: Optional[dict] = None,
    plurals: Optional[dict] = None,
) -> Catalog:
    """Create a Catalog instance.

    Args:
        locale: Locale for the catalog.
        strings: Resource name -> string value.
        plurals: Resource name -> PluralResource.

    Returns:
        Catalog instance.
    """
    if strings is None:
        strings = {"greeting": "Bonjour", "farewell": "Au revoir"}

    return Catalog(locale=locale, strings=dict(strings), plurals=dict(plurals or {}))


def make_plural_resource(
    one: Optional[str] = "{count} file", other: str = "{count} files", **forms: str
) -> PluralResource:
    """Create a PluralResource with "one" and "other" forms plus extras."""
    values = {"other": other, **forms}
    if one is not None:
        values["one"] = one
    return PluralResource(values)


def make_registry(
    locales: Iterable[Locale] = (FR, DE),
    default_locale: Locale = EN,
) -> LocaleRegistry:
    """Create a LocaleRegistry with locales registered."""
    registry = LocaleRegistry(default_locale=default_locale)
    registry.register_supported_locales(*locales)
    return registry


def make_binder(
    registry: Optional[LocaleRegistry] = None, on_duplicate: str = "warn"
) -> ResourceBinder:
    """Create a ResourceBinder, with a fresh FR/DE registry by default."""
    return ResourceBinder(registry or make_registry(), on_duplicate=on_duplicate)
