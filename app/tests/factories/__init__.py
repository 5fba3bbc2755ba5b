"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_plural_plugin,
    make_registry,
    make_russian_plural_plugin,
    make_static_plugin,
    make_translation_data,
    make_translator,
)

__all__ = [
    "make_plural_plugin",
    "make_registry",
    "make_russian_plural_plugin",
    "make_static_plugin",
    "make_translation_data",
    "make_translator",
]
