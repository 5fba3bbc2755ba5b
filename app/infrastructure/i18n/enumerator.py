"""Read-only listing of sibling keys, used to populate UI choices."""

from typing import Callable, List, Optional, TypeVar

from infrastructure.i18n.keys import find_node
from infrastructure.i18n.models import DEFAULT_KEY, PATH_SEPARATOR, TranslationNode

T = TypeVar("T")

DictMapper = Callable[[str, str, List[str]], T]


def _identity(key: str, path: str, children: List[str]) -> str:
    return key


def _listed_keys(node: Optional[TranslationNode]) -> List[str]:
    if node is None or not node.is_branch:
        return []
    return [key for key in node.keys() if key != DEFAULT_KEY]


def enumerate_keys(
    tree: Optional[TranslationNode],
    path: Optional[str] = None,
    mapper: Optional[DictMapper] = None,
) -> list:
    """List the keys of the branch at path, skipping ``default``.

    Args:
        tree: Root of one language's translation tree (None yields []).
        path: Dotted path of the branch to list, or None for the root.
        mapper: Called as ``mapper(key, full_path, child_keys)`` for each key;
            defaults to returning the key.

    Returns:
        Mapped entries in branch order, or [] if path is not a branch.
    """
    if tree is None:
        return []
    node = tree if path is None else find_node(tree, path.split(PATH_SEPARATOR))
    if node is None or not node.is_branch:
        return []

    mapper = mapper or _identity
    return [
        mapper(
            key,
            key if path is None else f"{path}{PATH_SEPARATOR}{key}",
            _listed_keys(node.child(key)),
        )
        for key in _listed_keys(node)
    ]
