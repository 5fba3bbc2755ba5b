"""Translation models for i18n system.

Defines the core data structures: languages, translation tree nodes, the
per-language translation map and the settings threaded into the translator.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

if TYPE_CHECKING:
    from infrastructure.i18n.diagnostics import DiagnosticSink
    from infrastructure.i18n.plugins import PluginRegistry

TranslationParams = Mapping[str, Any]
TemplateFunction = Callable[[TranslationParams], str]

DEFAULT_KEY = "default"
PATH_SEPARATOR = "."
MODIFIER_SEPARATOR = "_"


class Language(str, Enum):
    """Supported language identifiers."""

    EN = "en"
    RU = "ru"
    ZN = "zn"

    @classmethod
    def from_string(cls, language_str: Union[str, "Language"]) -> "Language":
        """Convert string to Language enum.

        Args:
            language_str: Language identifier (e.g., "en", "ru").

        Returns:
            Matching Language enum value.

        Raises:
            ValueError: If language identifier is not supported.
        """
        try:
            return cls(language_str)
        except ValueError as e:
            raise ValueError(f"Unsupported language: {language_str}") from e


class NodeKind(str, Enum):
    """Discriminant for the kinds of translation tree nodes."""

    BRANCH = "branch"
    TEXT = "text"
    NUMBER = "number"
    CALLABLE = "callable"


@dataclass(frozen=True)
class TranslationNode:
    """A node of a per-language translation tree.

    A node is either a branch (``children`` maps keys to child nodes) or a
    leaf holding a text template, a number or a template function in
    ``value``. Use the constructors rather than instantiating directly.

    Attributes:
        kind: Which variant this node is.
        value: Leaf payload (None for branches).
        children: Child nodes by key (empty for leaves).
    """

    kind: NodeKind
    value: Any = None
    children: Mapping[str, "TranslationNode"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def branch(cls, children: Mapping[str, "TranslationNode"]) -> "TranslationNode":
        return cls(kind=NodeKind.BRANCH, children=MappingProxyType(dict(children)))

    @classmethod
    def text(cls, template: str) -> "TranslationNode":
        return cls(kind=NodeKind.TEXT, value=template)

    @classmethod
    def number(cls, value: Union[int, float]) -> "TranslationNode":
        return cls(kind=NodeKind.NUMBER, value=value)

    @classmethod
    def template(cls, function: TemplateFunction) -> "TranslationNode":
        return cls(kind=NodeKind.CALLABLE, value=function)

    @classmethod
    def from_value(cls, raw: Any) -> "TranslationNode":
        """Build a node from plain data.

        Dicts become branches, strings text leaves, ints and floats number
        leaves and callables template leaves. Existing nodes are returned
        unchanged.

        Args:
            raw: Plain translation data.

        Returns:
            TranslationNode for the data.

        Raises:
            TypeError: If a value (or a branch key) has an unsupported type.
            ValueError: If a dict contains itself.
        """
        return cls._from_value(raw, ())

    @classmethod
    def _from_value(cls, raw: Any, ancestors: Tuple[int, ...]) -> "TranslationNode":
        if isinstance(raw, TranslationNode):
            return raw
        if isinstance(raw, Mapping):
            if id(raw) in ancestors:
                raise ValueError("Translation tree contains a cycle")
            children = {}
            for key, child in raw.items():
                if not isinstance(key, str):
                    raise TypeError(
                        f"Translation keys must be strings, got {type(key).__name__}: {key!r}"
                    )
                children[key] = cls._from_value(child, ancestors + (id(raw),))
            return cls.branch(children)
        if isinstance(raw, str):
            return cls.text(raw)
        # bool is an int subclass but never a valid translation
        if isinstance(raw, bool):
            raise TypeError(f"Unsupported translation value: {raw!r}")
        if isinstance(raw, (int, float)):
            return cls.number(raw)
        if callable(raw):
            return cls.template(raw)
        raise TypeError(
            f"Unsupported translation value of type {type(raw).__name__}: {raw!r}"
        )

    @property
    def is_branch(self) -> bool:
        return self.kind is NodeKind.BRANCH

    def child(self, key: str) -> Optional["TranslationNode"]:
        """Return the child stored under key, or None for leaves and misses."""
        if not self.is_branch:
            return None
        return self.children.get(key)

    def keys(self) -> List[str]:
        """Return child keys in insertion order (empty for leaves)."""
        return list(self.children.keys())

    def to_value(self) -> Any:
        """Convert the node back into plain data."""
        if self.is_branch:
            return {key: child.to_value() for key, child in self.children.items()}
        return self.value

    def merge(self, other: "TranslationNode") -> "TranslationNode":
        """Deep-merge other into a new node, other's values winning.

        Branches merge key by key; any other combination is replaced by
        other.
        """
        if not (self.is_branch and other.is_branch):
            return other
        merged: Dict[str, TranslationNode] = dict(self.children)
        for key, child in other.children.items():
            merged[key] = merged[key].merge(child) if key in merged else child
        return TranslationNode.branch(merged)


def split_modifiers(base_key: str, candidate_key: str) -> Tuple[str, ...]:
    """Extract the modifier tags of a candidate key relative to its base key.

    The reserved tag ``default`` is dropped, so ``msg_default`` counts as an
    unmodified variant of ``msg``.

    Args:
        base_key: Key segment being looked up (e.g., "price").
        candidate_key: Sibling key sharing the base (e.g., "price_plural").

    Returns:
        Tuple of modifier tags in key order (e.g., ("plural",)).
    """
    if candidate_key == base_key:
        return ()
    suffix = candidate_key[len(base_key) + 1 :]
    return tuple(
        tag for tag in suffix.split(MODIFIER_SEPARATOR) if tag and tag != DEFAULT_KEY
    )


@dataclass(frozen=True)
class Candidate:
    """A sibling key matching a base key, with its modifier tags.

    Attributes:
        key: Full sibling key (e.g., "price_plural").
        modifiers: Modifier tags after the base key (e.g., ("plural",)).
    """

    key: str
    modifiers: Tuple[str, ...] = ()

    @classmethod
    def for_key(cls, base_key: str, candidate_key: str) -> "Candidate":
        return cls(key=candidate_key, modifiers=split_modifiers(base_key, candidate_key))


class TranslationMap(Mapping[Language, TranslationNode]):
    """Immutable mapping from language to the root branch of its tree.

    Extending a map with more translations returns a new map; the original
    is never mutated.
    """

    def __init__(self, trees: Optional[Mapping[Language, TranslationNode]] = None):
        roots: Dict[Language, TranslationNode] = {}
        for language, tree in (trees or {}).items():
            node = TranslationNode.from_value(tree)
            if not node.is_branch:
                raise TypeError(
                    f"Translation root for {Language.from_string(language).value} must be a mapping"
                )
            roots[Language.from_string(language)] = node
        self._trees = MappingProxyType(roots)

    @classmethod
    def from_dict(cls, data: Mapping[Union[str, Language], Any]) -> "TranslationMap":
        """Create a TranslationMap from plain nested dicts keyed by language.

        Args:
            data: Mapping like {"en": {"greeting": "Hello"}}.

        Returns:
            TranslationMap instance.

        Raises:
            ValueError: If a language identifier is not supported.
            TypeError: If a tree contains unsupported values.
        """
        return cls(
            {
                Language.from_string(language): TranslationNode.from_value(tree)
                for language, tree in data.items()
            }
        )

    def __getitem__(self, language: Language) -> TranslationNode:
        return self._trees[language]

    def __iter__(self) -> Iterator[Language]:
        return iter(self._trees)

    def __len__(self) -> int:
        return len(self._trees)

    def __repr__(self) -> str:
        return f"TranslationMap(languages={[lang.value for lang in self._trees]})"

    @property
    def languages(self) -> List[Language]:
        return list(self._trees.keys())

    def tree_for(self, language: Language) -> Optional[TranslationNode]:
        """Return the tree root for language, or None if it has no translations."""
        return self._trees.get(language)

    def extend(
        self, other: Union["TranslationMap", Mapping[Union[str, Language], Any]]
    ) -> "TranslationMap":
        """Return a new map with other's translations deep-merged over these.

        Args:
            other: TranslationMap or plain mapping keyed by language.

        Returns:
            New TranslationMap; neither input is modified.
        """
        extra = other if isinstance(other, TranslationMap) else TranslationMap.from_dict(other)
        merged: Dict[Language, TranslationNode] = dict(self._trees)
        for language, tree in extra.items():
            merged[language] = merged[language].merge(tree) if language in merged else tree
        return TranslationMap(merged)

    def to_dict(self) -> Dict[str, Any]:
        return {language.value: tree.to_value() for language, tree in self._trees.items()}


@dataclass
class TranslationSettings:
    """Explicit configuration handed to a Translator.

    Attributes:
        translations: Per-language translation trees.
        language: Active language (None falls back to the first fallback language).
        fallback_languages: Languages tried, in order, after the active one.
        plugins: Modifier plugin registry (None means no plugins).
        prefix: Prefix prepended to every key with a "." separator.
        max_default_depth: Bound on ".default" recursion for branch leaves.
        diagnostics: Sink receiving ambiguity and degradation events
            (None routes them to the log).
    """

    translations: TranslationMap = field(default_factory=TranslationMap)
    language: Optional[Language] = None
    fallback_languages: List[Language] = field(default_factory=lambda: [Language.EN])
    plugins: Optional["PluginRegistry"] = None
    prefix: Optional[str] = None
    max_default_depth: int = 8
    diagnostics: Optional["DiagnosticSink"] = None
