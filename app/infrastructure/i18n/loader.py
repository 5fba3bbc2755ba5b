"""Translation loading interface and implementations.

Defines the contract for loading translation trees and provides YAML-based
and in-memory loaders.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from infrastructure.i18n.models import Language, TranslationMap, TranslationNode
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how translation documents are found and parsed
    for each language.
    """

    @abstractmethod
    def load(self, language: Language) -> TranslationNode:
        """Load the translation tree for a specific language.

        Args:
            language: Language to load translations for.

        Returns:
            Root branch of the language's tree.

        Raises:
            FileNotFoundError: If no translations exist for the language.
            ValueError: If the translation format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> TranslationMap:
        """Load translations for every available language.

        Returns:
            TranslationMap with one tree per language.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation documents.

    Expects files named ``<lang>.yml`` or ``<domain>.<lang>.yml`` in the
    translations directory. All files of a language are deep-merged, in
    file name order, into one tree.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded trees by language.
    """

    def __init__(
        self,
        translations_dir: Union[Path, str],
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded trees in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Language, TranslationNode] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files_for(self, language: Language) -> List[Path]:
        return sorted(
            path
            for path in self.translations_dir.glob("*.yml")
            if path.stem.split(".")[-1] == language.value
        )

    def load(self, language: Language) -> TranslationNode:
        """Load translations for a language from YAML files.

        Args:
            language: Language to load.

        Returns:
            Root branch of the merged tree.

        Raises:
            FileNotFoundError: If no YAML files exist for the language.
            ValueError: If YAML parsing fails or a document holds
                unsupported values.
        """
        if self.use_cache and language in self.cache:
            logger.debug("loaded_from_cache", language=language.value)
            return self.cache[language]

        yaml_files = self._files_for(language)
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for language {language.value} in {self.translations_dir}"
            )

        tree = TranslationNode.branch({})
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data is None:
                continue
            tree = self._merge_yaml_data(tree, data, yaml_file)

        logger.info(
            "loaded_translations",
            language=language.value,
            file_count=len(yaml_files),
            key_count=len(tree.keys()),
        )

        if self.use_cache:
            self.cache[language] = tree

        return tree

    def load_all(self) -> TranslationMap:
        """Load translations for all languages found in the directory.

        Returns:
            TranslationMap with each detected language.

        Raises:
            ValueError: If no recognizable translation files exist.
        """
        languages_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            language_str = yaml_file.stem.split(".")[-1]
            try:
                languages_found.add(Language.from_string(language_str))
            except ValueError:
                logger.debug("skipped_translation_file", file=str(yaml_file))

        if not languages_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        trees = {}
        for language in sorted(languages_found, key=lambda lang: lang.value):
            trees[language] = self.load(language)
        return TranslationMap(trees)

    def _merge_yaml_data(
        self,
        tree: TranslationNode,
        data: Any,
        source_file: Path,
    ) -> TranslationNode:
        """Merge one parsed YAML document into the tree.

        Args:
            tree: Tree built from earlier files.
            data: Parsed YAML document.
            source_file: Source file (for logging and errors).

        Returns:
            New merged tree.
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return tree
        try:
            document = TranslationNode.from_value(data)
        except TypeError as e:
            raise ValueError(f"Invalid translation document {source_file}: {e}") from e
        return tree.merge(document)

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


class DictTranslationLoader(TranslationLoader):
    """Loader over in-memory nested dicts keyed by language."""

    def __init__(
        self, translations: Union[TranslationMap, Mapping[Union[str, Language], Any]]
    ):
        self._map = (
            translations
            if isinstance(translations, TranslationMap)
            else TranslationMap.from_dict(translations)
        )

    def load(self, language: Language) -> TranslationNode:
        tree = self._map.tree_for(language)
        if tree is None:
            raise FileNotFoundError(f"No translations for language {language.value}")
        return tree

    def load_all(self) -> TranslationMap:
        return self._map
