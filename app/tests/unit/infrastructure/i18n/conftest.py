"""Feature-level fixtures for i18n system tests.

Provides YAML translation directories, plugin registries and translators.
"""

import pytest
import yaml

from infrastructure.i18n import YAMLTranslationLoader
from tests.factories.i18n import (
    make_plural_plugin,
    make_registry,
    make_russian_plural_plugin,
    make_translator,
)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - cart.en.yml
    - cart.ru.yml
    - common.en.yml
    - ru.yml
    - notes.txt (ignored)
    """
    with open(tmp_path / "cart.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "cart": {
                    "title": "Your cart",
                    "price_singular": "{{count}} item",
                    "price_plural": "{{count}} items",
                }
            },
            f,
            allow_unicode=True,
        )

    with open(tmp_path / "common.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "common": {"greeting": "Hello {{name}}", "answer": 42},
                "cart": {"empty": "Nothing here"},
            },
            f,
            allow_unicode=True,
        )

    with open(tmp_path / "cart.ru.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"cart": {"title": "Ваша корзина"}},
            f,
            allow_unicode=True,
        )

    with open(tmp_path / "ru.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"common": {"greeting": "Привет {{name}}"}},
            f,
            allow_unicode=True,
        )

    (tmp_path / "notes.txt").write_text("not a translation file")

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def plural_registry():
    """Registry with an English and a Russian plural plugin."""
    return make_registry(make_plural_plugin(), make_russian_plural_plugin())


@pytest.fixture
def translator(diagnostics, plural_registry):
    """Translator over the sample data with plural plugins."""
    return make_translator(plugins=plural_registry, diagnostics=diagnostics)
