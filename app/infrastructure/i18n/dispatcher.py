"""Selection among modifier variants of a translation key.

Given several sibling keys that share a base key (``price_singular``,
``price_plural``) the dispatcher narrows them down using the modifier tags
computed by each active plugin, in plugin order. Ambiguity never raises: if
the plugins do not single out one key, the candidate with the fewest
unconsumed tags wins and a diagnostic is emitted.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from infrastructure.i18n.diagnostics import (
    DiagnosticEvent,
    DiagnosticKind,
    DiagnosticSink,
    log_sink,
)
from infrastructure.i18n.models import Candidate, TranslationParams
from infrastructure.i18n.plugins import ActivePlugin


@dataclass(frozen=True)
class _Remaining:
    candidate: Candidate
    modifiers: Tuple[str, ...]

    def consume(self, modifier: str) -> "_Remaining":
        return _Remaining(
            candidate=self.candidate,
            modifiers=tuple(m for m in self.modifiers if m != modifier),
        )


def choose_variant(
    candidates: Sequence[Candidate],
    params: TranslationParams,
    plugins: Sequence[ActivePlugin],
    sink: Optional[DiagnosticSink] = None,
    language: Optional[str] = None,
    key: Optional[str] = None,
) -> str:
    """Pick exactly one candidate key.

    For each plugin in order, each tag it computes narrows the remaining
    candidates to those still carrying the tag. A tag matching no candidate
    is ignored; a tag matching exactly one candidate selects it at once. If
    no unique winner emerges, the first remaining candidate with no
    unconsumed tags is returned, otherwise the first one with the fewest.

    Args:
        candidates: Candidate keys in sibling order (must not be empty).
        params: Translation parameters passed to the plugins.
        plugins: Plugins active for the language, in registration order.
        sink: Diagnostic sink (defaults to logging).
        language: Language being resolved, attached to diagnostics.
        key: Key path being looked up, reported by ``modifier_ignored``
            events (defaults to the first candidate key).

    Returns:
        The chosen candidate key.

    Raises:
        ValueError: If candidates is empty.
    """
    if not candidates:
        raise ValueError("choose_variant requires at least one candidate")
    emit = sink or log_sink
    lookup_key = key if key is not None else candidates[0].key

    remaining: List[_Remaining] = [
        _Remaining(candidate=c, modifiers=c.modifiers) for c in candidates
    ]
    if len(remaining) == 1:
        return remaining[0].candidate.key

    for plugin in plugins:
        for modifier in plugin.modifiers(params):
            matching = [r for r in remaining if modifier in r.modifiers]
            if not matching:
                emit(
                    DiagnosticEvent(
                        kind=DiagnosticKind.MODIFIER_IGNORED,
                        key=lookup_key,
                        plugin=plugin.name,
                        modifier=modifier,
                        language=language,
                    )
                )
                continue
            if len(matching) == 1:
                return matching[0].candidate.key
            remaining = [r.consume(modifier) for r in matching]

    best = remaining[0]
    for entry in remaining:
        if not entry.modifiers:
            emit(
                DiagnosticEvent(
                    kind=DiagnosticKind.UNMODIFIED_FALLBACK,
                    key=entry.candidate.key,
                    language=language,
                )
            )
            return entry.candidate.key
        if len(entry.modifiers) < len(best.modifiers):
            best = entry

    emit(
        DiagnosticEvent(
            kind=DiagnosticKind.INEXACT_MATCH,
            key=best.candidate.key,
            language=language,
        )
    )
    return best.candidate.key
