"""Factory functions for creating localization components.

Provides convenience functions for building a registry and binder from the
application settings.
"""

from typing import Optional

from core.config import LocalizationSettings, settings as app_settings
from core.logging import get_module_logger
from localization.binder import ResourceBinder
from localization.models import Locale
from localization.registry import LocaleRegistry

logger = get_module_logger()


def create_registry(settings: Optional[LocalizationSettings] = None) -> LocaleRegistry:
    """Create a LocaleRegistry with the configured locales registered.

    Args:
        settings: Localization settings (default: application settings)

    Returns:
        LocaleRegistry: Registry with SUPPORTED_LOCALES registered, not frozen

    Raises:
        ValueError: If DEFAULT_LOCALE or a SUPPORTED_LOCALES entry is malformed

    Usage:
        registry = create_registry()
        binder = create_binder(registry)
        greeting = binder.declare_translatable("greeting", "Hello", {...})
        finish_setup(registry)
    """
    if settings is None:
        settings = app_settings.localization

    default_locale = Locale.from_string(settings.DEFAULT_LOCALE)
    registry = LocaleRegistry(default_locale=default_locale)

    locales = [Locale.from_string(tag) for tag in settings.SUPPORTED_LOCALES]
    supported = registry.register_supported_locales(*locales)

    logger.info(
        "registry_created",
        default_locale=default_locale.tag,
        locale_count=len(supported),
    )
    return registry


def create_binder(
    registry: LocaleRegistry, settings: Optional[LocalizationSettings] = None
) -> ResourceBinder:
    """Create a ResourceBinder applying the configured duplicate policy."""
    if settings is None:
        settings = app_settings.localization
    return ResourceBinder(registry, on_duplicate=settings.DUPLICATE_RESOURCES)


def finish_setup(
    registry: LocaleRegistry, settings: Optional[LocalizationSettings] = None
) -> LocaleRegistry:
    """End the declaration phase, freezing the registry if configured to."""
    if settings is None:
        settings = app_settings.localization
    if settings.FREEZE_AFTER_SETUP:
        registry.freeze()
    else:
        logger.warning("registry_left_unfrozen")
    return registry
