"""Dotted key path resolution within a single language's translation tree."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from infrastructure.i18n.diagnostics import (
    DiagnosticEvent,
    DiagnosticKind,
    DiagnosticSink,
    log_sink,
)
from infrastructure.i18n.dispatcher import choose_variant
from infrastructure.i18n.models import (
    MODIFIER_SEPARATOR,
    PATH_SEPARATOR,
    Candidate,
    Language,
    TranslationNode,
    TranslationParams,
)
from infrastructure.i18n.plugins import ActivePlugin


@dataclass(frozen=True)
class CandidateSet:
    """Sibling keys matching the last segment of a key path.

    Attributes:
        parent: Branch holding the candidates.
        base_key: Last segment of the looked up path.
        candidates: Matching sibling keys in branch order.
    """

    parent: TranslationNode
    base_key: str
    candidates: Tuple[Candidate, ...]

    def exact(self) -> Optional[Candidate]:
        """Return the candidate whose key equals the base key, if any."""
        for candidate in self.candidates:
            if candidate.key == self.base_key:
                return candidate
        return None


def split_key(key_path: str) -> Tuple[List[str], str]:
    """Split a dotted key path into its parent segments and base key.

    Example:
        >>> split_key("cart.items.price")
        (['cart', 'items'], 'price')
    """
    *parent, base_key = key_path.split(PATH_SEPARATOR)
    return parent, base_key


def find_node(tree: TranslationNode, segments: Sequence[str]) -> Optional[TranslationNode]:
    """Walk segments down from tree, returning None on any miss."""
    node: Optional[TranslationNode] = tree
    for segment in segments:
        if node is None:
            return None
        node = node.child(segment)
    return node


def resolve_candidates(tree: TranslationNode, key_path: str) -> Optional[CandidateSet]:
    """Collect the sibling keys a key path may refer to.

    Siblings match when they equal the base key or start with the base key
    followed by ``_``.

    Args:
        tree: Root of one language's translation tree.
        key_path: Dotted key path (e.g., "cart.price").

    Returns:
        CandidateSet, or None if the parent path is missing, is not a branch,
        or holds no matching key.
    """
    parent_path, base_key = split_key(key_path)
    parent = find_node(tree, parent_path)
    if parent is None or not parent.is_branch:
        return None

    prefix = base_key + MODIFIER_SEPARATOR
    candidates = tuple(
        Candidate.for_key(base_key, key)
        for key in parent.keys()
        if key == base_key or key.startswith(prefix)
    )
    if not candidates:
        return None
    return CandidateSet(parent=parent, base_key=base_key, candidates=candidates)


def resolve_node(
    tree: TranslationNode,
    key_path: str,
    params: TranslationParams,
    plugins: Sequence[ActivePlugin],
    sink: Optional[DiagnosticSink] = None,
    language: Optional[Language] = None,
) -> Optional[TranslationNode]:
    """Resolve a key path to a single node of one language's tree.

    A single candidate is returned as is. Several candidates go through the
    dispatcher when plugins are active. Without active plugins the exact
    base key wins; if it is absent the dispatcher still picks the variant
    with the fewest modifier tags and an ``unplugged_variant`` diagnostic is
    emitted.

    Args:
        tree: Root of the language's translation tree.
        key_path: Dotted key path.
        params: Translation parameters, passed to plugins.
        plugins: Plugins active for this language, in registration order.
        sink: Diagnostic sink (defaults to logging).
        language: Language being resolved, attached to diagnostics.

    Returns:
        The resolved node, or None on a miss.
    """
    found = resolve_candidates(tree, key_path)
    if found is None:
        return None

    emit = sink or log_sink
    language_value = language.value if language is not None else None

    if len(found.candidates) == 1:
        return found.parent.child(found.candidates[0].key)

    if not plugins:
        exact = found.exact()
        if exact is not None:
            return found.parent.child(exact.key)
        emit(
            DiagnosticEvent(
                kind=DiagnosticKind.UNPLUGGED_VARIANT,
                key=key_path,
                language=language_value,
            )
        )

    chosen = choose_variant(
        found.candidates,
        params,
        plugins,
        sink=emit,
        language=language_value,
        key=key_path,
    )
    return found.parent.child(chosen)
