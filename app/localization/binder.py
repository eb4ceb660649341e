"""Declaration-time builder for localized resources.

ResourceBinder writes a resource's default value into the default Catalog
and its translations into the registered Catalogs, then returns a resolver
bound to the resource name.
"""

from typing import Callable, Dict, Mapping, Set, TypeVar, Union

from core.logging import get_module_logger
from localization.exceptions import DuplicateResourceError, UnregisteredLocaleError
from localization.models import Catalog, CategoryKey, Locale, PluralResource
from localization.registry import LocaleRegistry
from localization.resolvers import PluralResolver, ResourceKind, StringResolver

logger = get_module_logger()

DUPLICATE_POLICIES = ("warn", "error")

V = TypeVar("V")

LocaleValues = Union[Mapping[Locale, V], Callable[[], Mapping[Locale, V]]]
PluralValue = Union[PluralResource, Mapping[CategoryKey, str]]


class ResourceBinder:
    """Declares string and plural resources into a LocaleRegistry.

    Declarations are expected during initialization only. A declaration that
    fails leaves every Catalog untouched.

    Attributes:
        registry: Registry whose catalogs receive the declared values.
        on_duplicate: "warn" logs and overwrites a re-declared name,
            "error" raises DuplicateResourceError.
    """

    def __init__(self, registry: LocaleRegistry, *, on_duplicate: str = "warn"):
        """Initialize the binder.

        Raises:
            ValueError: If on_duplicate is not a known policy.
        """
        if on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(
                f"on_duplicate must be one of {DUPLICATE_POLICIES}, got {on_duplicate!r}"
            )
        self.registry = registry
        self.on_duplicate = on_duplicate
        self._declared: Set[str] = set()

    def declared_names(self) -> frozenset:
        """Return every resource name declared through this binder."""
        return frozenset(self._declared)

    def declare_translatable(
        self,
        name: str,
        default_value: str,
        locale_values: LocaleValues[str],
    ) -> StringResolver:
        """Declare a string resource with per-locale translations.

        Args:
            name: Resource name, unique across the catalog space.
            default_value: Value for the default locale.
            locale_values: Mapping of locale to translated value, or a
                zero-argument callable returning one.

        Returns:
            Resolver preferring the supplied catalog's value.

        Raises:
            UnregisteredLocaleError: If a locale key was never registered.
            DuplicateResourceError: If name was already declared and the
                policy is "error".
            RegistryFrozenError: If the registry has been frozen.
        """
        targets = self._prepare(name, locale_values)

        self.registry.default_catalog.set_string(name, default_value)
        for catalog, value in targets.items():
            catalog.set_string(name, value)

        self._record(name, ResourceKind.TRANSLATABLE, len(targets))
        return StringResolver(
            name, ResourceKind.TRANSLATABLE, self.registry.default_catalog
        )

    def declare_non_translatable(self, name: str, default_value: str) -> StringResolver:
        """Declare a string resource that is the same in every locale.

        Returns:
            Resolver that always reads the default catalog.
        """
        self._prepare(name, {})

        self.registry.default_catalog.set_string(name, default_value)

        self._record(name, ResourceKind.NON_TRANSLATABLE, 0)
        return StringResolver(
            name, ResourceKind.NON_TRANSLATABLE, self.registry.default_catalog
        )

    def declare_plural(
        self,
        name: str,
        default_value: PluralValue,
        locale_values: LocaleValues[PluralValue],
    ) -> PluralResolver:
        """Declare a plural resource with per-locale translations.

        Values may be PluralResource instances or plain category -> text
        mappings; each must include the "other" category.

        Raises:
            ValueError: If a value has no "other" category or an unknown one.
            UnregisteredLocaleError: If a locale key was never registered.
        """
        targets = self._prepare(name, locale_values)
        default_resource = PluralResource.coerce(default_value)
        converted = {
            catalog: PluralResource.coerce(value) for catalog, value in targets.items()
        }

        self.registry.default_catalog.set_plural(name, default_resource)
        for catalog, resource in converted.items():
            catalog.set_plural(name, resource)

        self._record(name, ResourceKind.TRANSLATABLE, len(converted), plural=True)
        return PluralResolver(
            name, ResourceKind.TRANSLATABLE, self.registry.default_catalog
        )

    def declare_non_translatable_plural(
        self, name: str, default_value: PluralValue
    ) -> PluralResolver:
        """Declare a plural resource that is the same in every locale."""
        self._prepare(name, {})
        default_resource = PluralResource.coerce(default_value)

        self.registry.default_catalog.set_plural(name, default_resource)

        self._record(name, ResourceKind.NON_TRANSLATABLE, 0, plural=True)
        return PluralResolver(
            name, ResourceKind.NON_TRANSLATABLE, self.registry.default_catalog
        )

    def _prepare(self, name: str, locale_values: LocaleValues[V]) -> Dict[Catalog, V]:
        """Validate a declaration and map its values to target catalogs.

        Nothing is written here, so a failure leaves the registry unchanged.
        """
        self.registry.check_writable("declare")

        default_catalog = self.registry.default_catalog
        if default_catalog.has_string(name) or default_catalog.has_plural(name):
            if self.on_duplicate == "error":
                logger.error("duplicate_resource_rejected", resource=name)
                raise DuplicateResourceError(name)
            logger.warning("resource_redeclared", resource=name)

        if callable(locale_values):
            locale_values = locale_values()

        targets: Dict[Catalog, V] = {}
        for locale, value in locale_values.items():
            # The default locale takes its value from default_value only
            if locale == self.registry.default_locale or not self.registry.is_registered(
                locale
            ):
                logger.error(
                    "unregistered_locale_in_declaration",
                    resource=name,
                    locale=str(locale),
                )
                raise UnregisteredLocaleError(locale)
            targets[self.registry.get_catalog(locale)] = value
        return targets

    def _record(
        self, name: str, kind: ResourceKind, locale_count: int, plural: bool = False
    ) -> None:
        self._declared.add(name)
        logger.debug(
            "resource_declared",
            resource=name,
            kind=kind.value,
            plural=plural,
            locale_count=locale_count,
        )
