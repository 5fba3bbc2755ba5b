"""Placeholder substitution for translation templates."""

import math
from typing import Any, Union

from infrastructure.i18n.models import TranslationParams


def format_number(value: Union[int, float]) -> str:
    """Render a number as its canonical decimal string.

    Integral floats drop the trailing ".0" (``2.0`` -> ``"2"``).
    """
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _to_text(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def interpolate(template: str, params: TranslationParams) -> str:
    """Replace ``{{name}}`` placeholders with parameter values.

    Parameters are applied one at a time in the mapping's iteration order,
    each replacing every occurrence of its placeholder. A value that itself
    contains ``{{other}}`` can therefore be filled in by a later parameter.
    Placeholders without a matching parameter are left as they are.

    Args:
        template: Template string.
        params: Placeholder name -> value.

    Returns:
        Interpolated string.
    """
    for name, value in params.items():
        template = template.replace(f"{{{{{name}}}}}", _to_text(value))
    return template
