"""Custom exceptions for the localization catalog.

All of these signal configuration or programming errors. They are meant to
abort initialization or fail a test, never to be caught and replaced by an
empty string.
"""

from typing import Any, Optional


class LocalizationError(Exception):
    """Base exception for all localization catalog errors.

    Example:
        try:
            binder.declare_translatable("greeting", "Hello", {FR: "Bonjour"})
        except LocalizationError as e:
            logger.error("localization_setup_failed", error=str(e))
            raise
    """

    pass


class UnregisteredLocaleError(LocalizationError, LookupError):
    """Raised when a declaration references a locale that was never registered.

    Example:
        >>> binder.declare_translatable("greeting", "Hello", {Locale("es"): "Hola"})
        Traceback (most recent call last):
        ...
        UnregisteredLocaleError: No such registered locale: es
    """

    def __init__(self, locale: Any, message: Optional[str] = None):
        self.locale = locale
        super().__init__(message or f"No such registered locale: {locale}")


class ResourceNotFoundError(LocalizationError, LookupError):
    """Raised when neither the supplied nor the default catalog holds a resource.

    Example:
        >>> resolver(catalog)
        Traceback (most recent call last):
        ...
        ResourceNotFoundError: Resource 'greeting' not found in catalog fr
    """

    def __init__(self, name: str, locale: Any = None):
        self.name = name
        self.locale = locale
        where = f"catalog {locale}" if locale is not None else "default catalog"
        super().__init__(f"Resource {name!r} not found in {where}")


class DuplicateResourceError(LocalizationError, ValueError):
    """Raised when a resource name is declared twice under the 'error' policy.

    Example:
        >>> binder = ResourceBinder(registry, on_duplicate="error")
        >>> binder.declare_non_translatable("app_name", "Catalog")
        >>> binder.declare_non_translatable("app_name", "Other")
        Traceback (most recent call last):
        ...
        DuplicateResourceError: Resource 'app_name' already declared
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Resource {name!r} already declared")


class RegistryFrozenError(LocalizationError, RuntimeError):
    """Raised when registry or catalog state is written after freeze().

    Example:
        >>> registry.freeze()
        >>> registry.register_supported_locales(Locale("de"))
        Traceback (most recent call last):
        ...
        RegistryFrozenError: Locale registry is frozen
    """

    pass
