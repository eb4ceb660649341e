"""Locale catalog - declare localized resources once, resolve them per locale.

Main components:
- models: Locale, Catalog, PluralResource, PluralCategory
- registry: LocaleRegistry owning one Catalog per supported locale
- binder: ResourceBinder declaring resources and returning resolvers
- resolvers: StringResolver and PluralResolver with default-locale fallback
- context: LocaleContext exposing the current Catalog to call sites
- factory: create_registry / create_binder / finish_setup from settings
"""

from localization.binder import ResourceBinder
from localization.context import LocaleContext
from localization.exceptions import (
    DuplicateResourceError,
    LocalizationError,
    RegistryFrozenError,
    ResourceNotFoundError,
    UnregisteredLocaleError,
)
from localization.factory import create_binder, create_registry, finish_setup
from localization.models import Catalog, Locale, PluralCategory, PluralResource
from localization.registry import LocaleRegistry
from localization.resolvers import PluralResolver, ResourceKind, StringResolver

__all__ = [
    "Locale",
    "Catalog",
    "PluralCategory",
    "PluralResource",
    "LocaleRegistry",
    "ResourceBinder",
    "ResourceKind",
    "StringResolver",
    "PluralResolver",
    "LocaleContext",
    "create_registry",
    "create_binder",
    "finish_setup",
    "LocalizationError",
    "UnregisteredLocaleError",
    "ResourceNotFoundError",
    "DuplicateResourceError",
    "RegistryFrozenError",
]
