"""Locale registry owning one Catalog per supported locale.

The registry is constructed explicitly at startup, populated during the
declaration phase and frozen before it is handed to consumers:

    registry = LocaleRegistry()
    registry.register_supported_locales(Locale("fr"), Locale("de"))
    binder = ResourceBinder(registry)
    greeting = binder.declare_translatable("greeting", "Hello", {Locale("fr"): "Bonjour"})
    registry.freeze()

    greeting(registry.select_catalog(Locale("fr")))  # "Bonjour"

There is no internal locking. Registration and declaration must be
serialized by the caller; after freeze() every read is safe to share
between threads.
"""

from typing import Dict, FrozenSet, Optional

from core.logging import get_module_logger
from localization.exceptions import RegistryFrozenError, UnregisteredLocaleError
from localization.models import Catalog, Locale

logger = get_module_logger()


class LocaleRegistry:
    """Tracks supported locales and the Catalog of each.

    The default locale is implicit: its Catalog is always present, is kept
    apart from the per-locale catalogs and is the fallback for every lookup.

    Attributes:
        default_locale: Locale whose Catalog backs every resolution.
        default_catalog: Catalog for the default locale.
    """

    def __init__(self, default_locale: Optional[Locale] = None):
        """Initialize an empty registry.

        Args:
            default_locale: Fallback locale (default: Locale.ENGLISH).
        """
        self.default_locale = default_locale or Locale.ENGLISH
        self.default_catalog = Catalog(self.default_locale)
        self._catalogs: Dict[Locale, Catalog] = {}
        self._frozen = False
        self.log = logger.bind(default_locale=self.default_locale.tag)
        self.log.info("initialized_locale_registry")

    @property
    def supported_locales(self) -> FrozenSet[Locale]:
        """Registered locales, excluding the default locale."""
        return frozenset(self._catalogs)

    @property
    def catalogs(self) -> Dict[Locale, Catalog]:
        """Copy of the locale -> Catalog map, excluding the default catalog."""
        return dict(self._catalogs)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register_supported_locales(self, *locales: Locale) -> FrozenSet[Locale]:
        """Register locales and create an empty Catalog for each new one.

        Re-registering a locale, or registering the default locale, is a
        no-op for that locale.

        Args:
            *locales: Locales to register, in any order, duplicates allowed.

        Returns:
            Every supported locale, including the default locale.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
        """
        self.check_writable("register_supported_locales")
        has_declarations = bool(self.default_catalog.names())

        for locale in locales:
            if locale == self.default_locale or locale in self._catalogs:
                continue
            self._catalogs[locale] = Catalog(locale)
            self.log.info("locale_registered", locale=str(locale))
            if has_declarations:
                # Resources declared so far will resolve to the default value here
                self.log.warning(
                    "locale_registered_after_declarations",
                    locale=str(locale),
                    declared_resources=len(self.default_catalog.names()),
                )

        return self.supported_locales | {self.default_locale}

    def is_registered(self, locale: Locale) -> bool:
        """Check whether locale has a Catalog (the default locale always does)."""
        return locale == self.default_locale or locale in self._catalogs

    def get_catalog(self, locale: Locale) -> Catalog:
        """Return the Catalog for a registered locale.

        Raises:
            UnregisteredLocaleError: If locale was never registered.
        """
        if locale == self.default_locale:
            return self.default_catalog
        try:
            return self._catalogs[locale]
        except KeyError:
            raise UnregisteredLocaleError(locale) from None

    def select_catalog(self, locale: Locale) -> Catalog:
        """Return the Catalog for locale, or the default Catalog if unregistered.

        Unregistered locales are not an error at selection time.
        """
        return self._catalogs.get(locale, self.default_catalog)

    def freeze(self) -> None:
        """Close the declaration phase.

        Every Catalog becomes read-only. Further registrations and
        declarations raise RegistryFrozenError.
        """
        if self._frozen:
            return
        self.default_catalog.freeze()
        for catalog in self._catalogs.values():
            catalog.freeze()
        self._frozen = True
        self.log.info(
            "registry_frozen",
            locale_count=len(self._catalogs) + 1,
            resource_count=len(self.default_catalog.names()),
        )

    def check_writable(self, operation: str) -> None:
        """Raise RegistryFrozenError if the declaration phase is closed."""
        if self._frozen:
            self.log.error("write_to_frozen_registry", operation=operation)
            raise RegistryFrozenError("Locale registry is frozen")
