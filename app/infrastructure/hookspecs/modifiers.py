"""Hook specifications for translation modifier plugins."""

from typing import Any, Mapping, Sequence

import pluggy

PROJECT_NAME = "i18n_engine"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)


@hookspec
def compute_modifiers(params: Mapping[str, Any]) -> Sequence[str]:
    """Compute the modifier tags that apply to a translation call.

    Tags are returned in priority order. They are matched against the
    underscore-separated suffixes of sibling keys (e.g. "plural" selects
    "price_plural" over "price_singular").

    Args:
        params: Parameters passed to the translation call.

    Returns:
        Ordered sequence of modifier tags.
    """
