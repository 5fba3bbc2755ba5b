"""Diagnostic events emitted while resolving translations.

Ambiguous or degraded lookups never raise. They are reported to a sink, a
plain callable taking a DiagnosticEvent, so hosts can collect, silence or
route them. The default sink writes structured warnings to the log.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Callable, List, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class DiagnosticKind(str, Enum):
    """Kinds of resolution diagnostics."""

    MODIFIER_IGNORED = "modifier_ignored"
    UNMODIFIED_FALLBACK = "unmodified_fallback"
    INEXACT_MATCH = "inexact_match"
    UNPLUGGED_VARIANT = "unplugged_variant"
    DEFAULT_DEPTH_EXCEEDED = "default_depth_exceeded"


@dataclass(frozen=True)
class DiagnosticEvent:
    """A single diagnostic raised during resolution.

    Attributes:
        kind: What happened.
        key: Candidate or lookup key the event is about.
        plugin: Name of the plugin involved, if any.
        modifier: Modifier tag involved, if any.
        language: Language being resolved, if known.
    """

    kind: DiagnosticKind
    key: str
    plugin: Optional[str] = None
    modifier: Optional[str] = None
    language: Optional[str] = None


DiagnosticSink = Callable[[DiagnosticEvent], None]


def log_sink(event: DiagnosticEvent) -> None:
    """Write the event to the log as a warning named after its kind."""
    fields = {
        name: value
        for name, value in asdict(event).items()
        if name != "kind" and value is not None
    }
    logger.warning(event.kind.value, **fields)


def null_sink(event: DiagnosticEvent) -> None:
    """Discard the event."""


class CollectingSink:
    """Sink that keeps every event it receives.

    Attributes:
        events: Received events in emission order.
    """

    def __init__(self):
        self.events: List[DiagnosticEvent] = []

    def __call__(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: DiagnosticKind) -> List[DiagnosticEvent]:
        return [event for event in self.events if event.kind == kind]

    def clear(self) -> None:
        self.events.clear()
