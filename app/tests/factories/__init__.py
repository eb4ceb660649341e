"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_binder,
    make_catalog,
    make_locale,
    make_plural_resource,
    make_registry,
)

__all__ = [
    "make_binder",
    "make_catalog",
    "make_locale",
    "make_plural_resource",
    "make_registry",
]
