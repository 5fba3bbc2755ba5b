"""Language resolution logic for choosing the active language.

Provides the order used to pick the language of a translation call and the
validation of configured language identifiers.
"""

from typing import Optional, Sequence, Union

from infrastructure.i18n.models import Language
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LanguageResolver:
    """Resolves the language to translate into.

    Implements the chain used by translation calls:
    1. Explicit override
    2. Configured language
    3. First fallback language
    4. Default language
    """

    def __init__(self, default_language: Language = Language.EN):
        """Initialize language resolver.

        Args:
            default_language: Language used when nothing else is available.
        """
        self.default_language = default_language
        self.log = logger.bind(default_language=default_language.value)

    def resolve(
        self,
        override: Optional[Union[Language, str]] = None,
        configured: Optional[Union[Language, str]] = None,
        fallback_languages: Sequence[Language] = (),
    ) -> Language:
        """Resolve the active language.

        Args:
            override: Language forced for one call.
            configured: Language from settings.
            fallback_languages: Ordered fallback languages.

        Returns:
            Resolved Language.

        Raises:
            ValueError: If override or configured is not a supported language.
        """
        if override is not None:
            return Language.from_string(override)
        if configured is not None:
            return Language.from_string(configured)
        if fallback_languages:
            return Language.from_string(fallback_languages[0])
        return self.default_language

    def resolve_from_string(self, language_str: str) -> Language:
        """Parse and validate a language identifier.

        Raises:
            ValueError: If language_str is not supported.
        """
        try:
            return Language.from_string(language_str.strip().lower())
        except ValueError:
            self.log.warning("invalid_language_string", language_str=language_str)
            raise
