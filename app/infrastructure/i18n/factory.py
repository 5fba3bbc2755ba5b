"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators from the
application settings.
"""

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.diagnostics import DiagnosticSink
from infrastructure.i18n.loader import (
    DictTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import TranslationMap, TranslationSettings
from infrastructure.i18n.plugins import PluginRegistry
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def _default_settings() -> I18nSettings:
    from infrastructure.configuration import settings

    return settings.i18n


def create_translator(
    settings: Optional[I18nSettings] = None,
    translations: Optional[Union[TranslationMap, Mapping[Any, Any]]] = None,
    translations_dir: Optional[Path] = None,
    plugins: Union[PluginRegistry, Iterable[Any]] = (),
    diagnostics: Optional[DiagnosticSink] = None,
    load_entrypoints: Optional[bool] = None,
    use_cache: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Translations come from, in order of precedence: the ``translations``
    argument, YAML files in ``translations_dir``, YAML files in
    ``settings.translations_dir``. With none of these the translator starts
    empty and every key resolves to itself.

    Args:
        settings: I18n settings (default: application settings).
        translations: In-memory translations keyed by language.
        translations_dir: Directory of ``<domain>.<lang>.yml`` files.
        plugins: PluginRegistry, or modifier plugins to register in order.
        diagnostics: Sink for resolution diagnostics (default: logging).
        load_entrypoints: Also load plugins from installed entry points
            (default: settings.load_entrypoints).
        use_cache: Whether the YAML loader caches parsed trees.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If a configured language is unsupported or the
            translations directory does not exist.

    Usage:
        # Use application settings
        translator = create_translator()

        # In-memory translations
        translator = create_translator(
            translations={"en": {"greeting": "Hello {{name}}"}},
        )
    """
    settings = settings or _default_settings()

    loader: Optional[TranslationLoader] = None
    if translations is not None:
        loader = DictTranslationLoader(translations)
    elif translations_dir is not None or settings.translations_dir is not None:
        directory = translations_dir or settings.translations_dir
        loader = YAMLTranslationLoader(translations_dir=directory, use_cache=use_cache)

    if loader is not None:
        translation_map = loader.load_all()
    else:
        logger.warning("translator_created_without_translations")
        translation_map = TranslationMap()

    registry = plugins if isinstance(plugins, PluginRegistry) else PluginRegistry(plugins)
    should_load_entrypoints = (
        settings.load_entrypoints if load_entrypoints is None else load_entrypoints
    )
    if should_load_entrypoints:
        registry.load_entrypoints()

    resolver = LanguageResolver()
    translator = Translator(
        TranslationSettings(
            translations=translation_map,
            language=(
                resolver.resolve_from_string(settings.language)
                if settings.language
                else None
            ),
            fallback_languages=[
                resolver.resolve_from_string(lang)
                for lang in settings.fallback_languages
            ],
            plugins=registry,
            prefix=settings.key_prefix,
            max_default_depth=settings.max_default_depth,
            diagnostics=diagnostics,
        )
    )
    logger.info(
        "translator_created",
        languages=[lang.value for lang in translation_map.languages],
        plugin_count=len(registry),
    )
    return translator
