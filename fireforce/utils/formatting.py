"""
Helpers for turning loosely typed JSON values into display strings and numbers.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Optional

_LEADING_FLOAT = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def stringify_value(value: Any) -> str:
    """Render a JSON value the way the browser would print it.

    Booleans become ``"true"``/``"false"``, integral floats drop the trailing
    ``.0``, non-finite floats use the JSON-literal spellings (``NaN``,
    ``Infinity``) and nested lists/dicts are JSON-encoded.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        # Browsers switch to exponent notation at 1e21, matching str() there
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def parse_leading_float(value: Any) -> Optional[float]:
    """Parse the numeric prefix of a value, ``"51.5N"`` -> 51.5.

    Returns None when the value does not start with a number.
    """
    if is_number(value):
        return float(value)
    if value is None or isinstance(value, bool):
        return None
    match = _LEADING_FLOAT.match(stringify_value(value))
    if not match:
        return None
    try:
        return float(match.group(1))
    except (TypeError, ValueError):
        return None
