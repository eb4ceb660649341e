"""Resolvers returned by resource declarations.

A resolver is a small value object bound to one resource name. Calling it
with a Catalog returns the resource value for that catalog's locale,
falling back to the default catalog.
"""

from dataclasses import dataclass, field
from enum import Enum

from core.logging import get_module_logger
from localization.exceptions import ResourceNotFoundError
from localization.models import Catalog, CategoryKey, PluralResource

logger = get_module_logger()


class ResourceKind(str, Enum):
    """Whether a resource varies by locale."""

    TRANSLATABLE = "translatable"
    NON_TRANSLATABLE = "non_translatable"


@dataclass(frozen=True)
class StringResolver:
    """Resolves a string resource against a Catalog.

    Attributes:
        name: Resource name.
        kind: TRANSLATABLE reads the supplied catalog first,
            NON_TRANSLATABLE always reads the default catalog.
        default_catalog: Fallback catalog the resource was declared into.
    """

    name: str
    kind: ResourceKind
    default_catalog: Catalog = field(repr=False, compare=False)

    def resolve(self, catalog: Catalog) -> str:
        """Return the resource value for catalog.

        Raises:
            ResourceNotFoundError: If neither catalog holds the resource.
        """
        value = None
        if self.kind is ResourceKind.TRANSLATABLE:
            value = catalog.get_string(self.name)
        if value is None:
            value = self.default_catalog.get_string(self.name)
        if value is None:
            logger.error(
                "resource_not_found",
                resource=self.name,
                kind=self.kind.value,
                locale=str(catalog.locale),
            )
            raise ResourceNotFoundError(self.name, catalog.locale)
        return value

    def __call__(self, catalog: Catalog) -> str:
        return self.resolve(catalog)


@dataclass(frozen=True)
class PluralResolver:
    """Resolves a plural resource against a Catalog.

    Same fallback rules as StringResolver, over the catalogs' plural maps.
    """

    name: str
    kind: ResourceKind
    default_catalog: Catalog = field(repr=False, compare=False)

    def resolve(self, catalog: Catalog) -> PluralResource:
        """Return the plural resource for catalog.

        Raises:
            ResourceNotFoundError: If neither catalog holds the resource.
        """
        value = None
        if self.kind is ResourceKind.TRANSLATABLE:
            value = catalog.get_plural(self.name)
        if value is None:
            value = self.default_catalog.get_plural(self.name)
        if value is None:
            logger.error(
                "resource_not_found",
                resource=self.name,
                kind=self.kind.value,
                locale=str(catalog.locale),
            )
            raise ResourceNotFoundError(self.name, catalog.locale)
        return value

    def resolve_quantity(self, catalog: Catalog, category: CategoryKey) -> str:
        """Return the text for a plural category, falling back to OTHER.

        The caller picks the category; no plural rules are applied here.
        """
        return self.resolve(catalog).select(category)

    def __call__(self, catalog: Catalog) -> PluralResource:
        return self.resolve(catalog)
