"""i18n system - translation key resolution engine.

Resolves dotted keys against per-language translation trees, picks among
modifier variants of a key (``price_singular``/``price_plural``) with
pluggable modifier plugins, falls back through an ordered list of languages
and interpolates ``{{placeholder}}`` parameters.

Main components:
- models: Language, TranslationNode, TranslationMap, TranslationSettings
- interpolation: interpolate() for {{placeholder}} substitution
- plugins: ModifierPlugin, FunctionPlugin and PluginRegistry
- dispatcher: choose_variant() among modifier variants
- keys: dotted path resolution within one language
- translator: Translator with the language fallback chain
- enumerator: enumerate_keys() for listing sibling keys
- loader: TranslationLoader, YAMLTranslationLoader and DictTranslationLoader
- resolvers: LanguageResolver for choosing the active language
"""

from infrastructure.i18n.diagnostics import (
    CollectingSink,
    DiagnosticEvent,
    DiagnosticKind,
    log_sink,
    null_sink,
)
from infrastructure.i18n.dispatcher import choose_variant
from infrastructure.i18n.enumerator import enumerate_keys
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.interpolation import interpolate
from infrastructure.i18n.loader import (
    DictTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    Candidate,
    Language,
    NodeKind,
    TranslationMap,
    TranslationNode,
    TranslationSettings,
)
from infrastructure.i18n.plugins import (
    FunctionPlugin,
    ModifierPlugin,
    PluginRegistry,
    hookimpl,
)
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.service import BoundTranslation, TranslationService
from infrastructure.i18n.translator import Translator

__all__ = [
    "Language",
    "NodeKind",
    "TranslationNode",
    "TranslationMap",
    "TranslationSettings",
    "Candidate",
    "CollectingSink",
    "DiagnosticEvent",
    "DiagnosticKind",
    "log_sink",
    "null_sink",
    "interpolate",
    "choose_variant",
    "enumerate_keys",
    "ModifierPlugin",
    "FunctionPlugin",
    "PluginRegistry",
    "hookimpl",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "DictTranslationLoader",
    "LanguageResolver",
    "Translator",
    "TranslationService",
    "BoundTranslation",
    "create_translator",
]
