"""Ambient locale context for call sites.

Thin adapter that keeps the active locale in a ContextVar and turns it into
a Catalog through LocaleRegistry.select_catalog. Each thread and asyncio
task sees its own value.

Usage:
    context = LocaleContext(registry)

    with context.use(Locale("fr")):
        context.resolve(greeting)  # "Bonjour"
"""

import contextvars
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from core.logging import get_module_logger
from localization.models import Catalog, Locale
from localization.registry import LocaleRegistry

logger = get_module_logger()

T = TypeVar("T")


class LocaleContext:
    """Exposes the current Catalog to call sites.

    The locale defaults to the registry's default locale until overridden
    with use().
    """

    def __init__(self, registry: LocaleRegistry, name: str = "current_locale"):
        self.registry = registry
        self._locale: contextvars.ContextVar[Optional[Locale]] = contextvars.ContextVar(
            name, default=None
        )

    @property
    def current_locale(self) -> Locale:
        return self._locale.get() or self.registry.default_locale

    @property
    def current_catalog(self) -> Catalog:
        return self.registry.select_catalog(self.current_locale)

    @contextmanager
    def use(self, locale: Locale) -> Iterator[Catalog]:
        """Override the active locale for the duration of the block.

        Overrides nest; the previous locale is restored on exit.

        Yields:
            The Catalog selected for locale.
        """
        token = self._locale.set(locale)
        if not self.registry.is_registered(locale):
            logger.debug("context_locale_unregistered", locale=str(locale))
        try:
            yield self.registry.select_catalog(locale)
        finally:
            self._locale.reset(token)

    def resolve(self, resolver: Callable[[Catalog], T]) -> T:
        """Invoke resolver with the current Catalog."""
        return resolver(self.current_catalog)
