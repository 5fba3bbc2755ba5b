"""Translation service resolving keys across a language fallback chain.

Core component of the i18n engine: resolves dotted keys against the active
language's tree, falls back through the configured languages in order and
renders the resolved node.
"""

from dataclasses import replace
from typing import Any, List, Mapping, Optional, Union

from infrastructure.i18n.diagnostics import (
    DiagnosticEvent,
    DiagnosticKind,
    DiagnosticSink,
    log_sink,
)
from infrastructure.i18n.enumerator import DictMapper, enumerate_keys
from infrastructure.i18n.interpolation import format_number, interpolate
from infrastructure.i18n.keys import resolve_candidates, resolve_node
from infrastructure.i18n.models import (
    DEFAULT_KEY,
    PATH_SEPARATOR,
    Language,
    NodeKind,
    TranslationMap,
    TranslationNode,
    TranslationParams,
    TranslationSettings,
)
from infrastructure.i18n.plugins import ActivePlugin, PluginRegistry
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LanguageLike = Union[Language, str]


class Translator:
    """Service for resolving translation keys with language fallback.

    Lookups never raise for missing or ambiguous content: a key that no
    language in the chain can resolve is returned unchanged, so missing
    translations show up in rendered output.

    Attributes:
        settings: Configuration the translator was built from.
        translations: Per-language translation trees.
        fallback_languages: Languages tried, in order, after the active one.
        plugins: Modifier plugin registry.
        diagnostics: Sink for ambiguity and degradation events.
    """

    def __init__(self, settings: TranslationSettings):
        """Initialize Translator.

        Args:
            settings: Translation settings (translations, languages, plugins).
        """
        self.settings = settings
        self.translations: TranslationMap = settings.translations
        self.fallback_languages: List[Language] = [
            Language.from_string(lang) for lang in settings.fallback_languages
        ]
        self.plugins: PluginRegistry = (
            settings.plugins if settings.plugins is not None else PluginRegistry()
        )
        self.diagnostics: DiagnosticSink = settings.diagnostics or log_sink
        self.resolver = LanguageResolver()
        logger.debug(
            "initialized_translator",
            language=self.active_language().value,
            fallback_languages=[lang.value for lang in self.fallback_languages],
            plugin_count=len(self.plugins),
        )

    @property
    def language(self) -> Language:
        """The language used when no override is given."""
        return self.active_language()

    def active_language(self, override: Optional[LanguageLike] = None) -> Language:
        """Pick the language for a call.

        Order: the override, then the configured language, then the first
        fallback language, then English.

        Raises:
            ValueError: If the override is not a supported language.
        """
        return self.resolver.resolve(
            override=override,
            configured=self.settings.language,
            fallback_languages=self.fallback_languages,
        )

    def language_order(self, language: Language) -> List[Language]:
        """Languages tried for a lookup, the active one first."""
        order = [language]
        for fallback in self.fallback_languages:
            if fallback not in order:
                order.append(fallback)
        return order

    def get_available_languages(self) -> List[Language]:
        return self.translations.languages

    def _active_plugins(self, language: Language) -> List[ActivePlugin]:
        return self.plugins.for_language(language)

    def _lookup(
        self, key: str, params: TranslationParams, language: Language
    ) -> Optional[TranslationNode]:
        for candidate_language in self.language_order(language):
            tree = self.translations.tree_for(candidate_language)
            if tree is None:
                continue
            node = resolve_node(
                tree,
                key,
                params,
                self._active_plugins(candidate_language),
                sink=self.diagnostics,
                language=candidate_language,
            )
            if node is None:
                continue
            if candidate_language != language:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_language=language.value,
                    fallback_language=candidate_language.value,
                )
            return node
        return None

    def _render(
        self,
        key: str,
        params: TranslationParams,
        language: Language,
        depth: int,
    ) -> Optional[str]:
        node = self._lookup(key, params, language)
        if node is None:
            logger.debug("translation_not_found", key=key, language=language.value)
            return None

        match node.kind:
            case NodeKind.BRANCH:
                if depth >= self.settings.max_default_depth:
                    self.diagnostics(
                        DiagnosticEvent(
                            kind=DiagnosticKind.DEFAULT_DEPTH_EXCEEDED,
                            key=key,
                            language=language.value,
                        )
                    )
                    return None
                return self._render(
                    f"{key}{PATH_SEPARATOR}{DEFAULT_KEY}", params, language, depth + 1
                )
            case NodeKind.CALLABLE:
                return node.value(params)
            case NodeKind.NUMBER:
                return format_number(node.value)
            case NodeKind.TEXT:
                return interpolate(node.value, params)
        return None

    def resolve(
        self,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        language: Optional[LanguageLike] = None,
    ) -> Optional[str]:
        """Resolve a full key path without applying the prefix.

        Args:
            key: Dotted key path.
            params: Placeholder values, also passed to modifier plugins.
            language: Language override for this call.

        Returns:
            Rendered translation, or None if no language in the chain has it.
        """
        return self._render(key, params or {}, self.active_language(language), 0)

    def prepare_key(self, key: str) -> str:
        """Apply the configured prefix to key."""
        if self.settings.prefix:
            return f"{self.settings.prefix}{PATH_SEPARATOR}{key}"
        return key

    def translate(
        self,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        language: Optional[LanguageLike] = None,
    ) -> str:
        """Translate a key.

        Args:
            key: Dotted key path (the prefix, if configured, is prepended).
            params: Placeholder values, also passed to modifier plugins.
            language: Language override for this call.

        Returns:
            Rendered translation, or the prefixed key itself when missing.
        """
        prepared = self.prepare_key(key)
        result = self.resolve(prepared, params, language)
        return prepared if result is None else result

    def enumerate(
        self,
        path: Optional[str] = None,
        mapper: Optional[DictMapper] = None,
        language: Optional[LanguageLike] = None,
    ) -> list:
        """List keys of the branch at path in the active language.

        Does not apply the prefix, the fallback chain or plugins.
        """
        tree = self.translations.tree_for(self.active_language(language))
        return enumerate_keys(tree, path, mapper)

    def has_message(self, key: str, language: LanguageLike) -> bool:
        """Check whether key has at least one candidate in language (no fallback)."""
        tree = self.translations.tree_for(Language.from_string(language))
        return tree is not None and resolve_candidates(tree, key) is not None

    def derive(self, **changes: Any) -> "Translator":
        """Return a new Translator whose settings differ by changes."""
        return Translator(replace(self.settings, **changes))

    def extend(self, extra: Union[TranslationMap, Mapping[Any, Any]]) -> "Translator":
        """Return a new Translator with extra translations merged over these."""
        return self.derive(translations=self.translations.extend(extra))
