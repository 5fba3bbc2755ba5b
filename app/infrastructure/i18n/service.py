"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from infrastructure.i18n.enumerator import DictMapper
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.models import Language, TranslationMap
from infrastructure.i18n.translator import LanguageLike, Translator


@dataclass(frozen=True)
class BoundTranslation:
    """Translation functions bound to one configuration.

    Attributes:
        translator: Translator the functions delegate to.
    """

    translator: Translator

    @property
    def language(self) -> Language:
        return self.translator.language

    @property
    def fallback_languages(self) -> List[Language]:
        return list(self.translator.fallback_languages)

    def translate(
        self,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        language: Optional[LanguageLike] = None,
    ) -> str:
        return self.translator.translate(key, params, language)

    t = translate

    def enumerate(
        self,
        path: Optional[str] = None,
        mapper: Optional[DictMapper] = None,
        language: Optional[LanguageLike] = None,
    ) -> list:
        return self.translator.enumerate(path, mapper, language)


class TranslationService:
    """Class-based translation service.

    Wraps the Translator instance with a service interface to support
    dependency injection and easier testing with mocks.

    Usage:
        service = TranslationService()
        message = service.translate("cart.total", {"count": 3})

        # Component-scoped translations and key prefix
        cart = service.use_translation(
            extra={"en": {"cart": {"title": "Your cart"}}},
            prefix="cart",
        )
        cart.t("title")
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        language: Optional[LanguageLike] = None,
    ) -> str:
        """Translate a key, returning the key itself when it is missing."""
        return self._translator.translate(key, params, language)

    def enumerate(
        self,
        path: Optional[str] = None,
        mapper: Optional[DictMapper] = None,
        language: Optional[LanguageLike] = None,
    ) -> list:
        """List the keys under path (excluding "default")."""
        return self._translator.enumerate(path, mapper, language)

    def has_message(self, key: str, language: LanguageLike) -> bool:
        return self._translator.has_message(key, language)

    def get_available_languages(self) -> List[Language]:
        return self._translator.get_available_languages()

    def use_translation(
        self,
        extra: Optional[Union[TranslationMap, Mapping[Any, Any]]] = None,
        prefix: Optional[str] = None,
    ) -> BoundTranslation:
        """Bind translation functions for one consumer.

        Extra translations are merged over the shared ones into a new map; the
        shared translations are never modified.

        Args:
            extra: Translations keyed by language, visible only to this binding.
            prefix: Key prefix for this binding (replaces the configured one).

        Returns:
            BoundTranslation with ``t``/``translate`` and ``enumerate``.
        """
        translator = self._translator
        if extra is not None:
            translator = translator.extend(extra)
        if prefix is not None:
            translator = translator.derive(prefix=prefix)
        return BoundTranslation(translator=translator)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
