"""Message template rendering.

Templates are plain strings with ``{name}`` placeholders. Placeholders without
a matching parameter are kept verbatim, so a template may safely mention
braces the caller never fills in.
"""
from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Mapping

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

_COMPOSITE_TYPES = (list, tuple, dict, set, frozenset)


def is_composite(value: Any) -> bool:
    """True for values that can never equal a scalar (collections and objects)."""
    if value is None or isinstance(value, (bool, int, float, Decimal, str)):
        return False
    return True


def type_name(value: Any) -> str:
    """Language-neutral type name used for the ``{type}`` message parameter."""
    if value is None: return "null"
    if isinstance(value, bool): return "bool"
    if isinstance(value, int): return "int"
    if isinstance(value, (float, Decimal)): return "float"
    if isinstance(value, str): return "string"
    if isinstance(value, _COMPOSITE_TYPES): return "array"
    return "object"


def stringify(value: Any) -> str:
    """Text form of a message parameter."""
    if value is None: return "null"
    if isinstance(value, bool): return "true" if value else "false"
    # Decimal renders ints of any size; str(int) stops at sys.get_int_max_str_digits()
    if isinstance(value, int): return str(Decimal(value))
    if isinstance(value, (float, Decimal, str)): return str(value)
    if isinstance(value, _COMPOSITE_TYPES): return "array"
    return "object"


class MessageFormatter:
    """Renders a template against named parameters.

    Stateless, so one instance is shared by every handler and every thread.
    """

    __slots__ = ()

    def format(self, template: str, parameters: Mapping[str, Any]) -> str:
        def _replace(match: re.Match) -> str:
            key = match.group(1)
            return stringify(parameters[key]) if key in parameters else match.group(0)

        return _PLACEHOLDER.sub(_replace, template)
