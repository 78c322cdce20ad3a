"""
Primitive coercion of raw query-string scalars.

Query-string deserializers hand over strings for everything; these
helpers turn them into typed values and raise ``TypeCoercionError``
instead of guessing when the input is ambiguous.
"""

from __future__ import annotations

import math
from typing import Any

from .exceptions import TypeCoercionError

_TRUE_VALUES = ("true", "t", "1")
_FALSE_VALUES = ("false", "f", "0")


def parse_boolean(value: Any, param: str = "count") -> bool:
    """Coerce *value* to ``bool``.

    Accepts booleans, ``1``/``0`` and the strings ``true``, ``t``, ``1``,
    ``false``, ``f``, ``0`` (case-insensitive).
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
    elif isinstance(value, str):
        low = value.strip().lower()
        if low in _TRUE_VALUES:
            return True
        if low in _FALSE_VALUES:
            return False
    raise TypeCoercionError(
        f"Invalid boolean input {value!r}. "
        "Expected 't','1','true','false','0','f'",
        param=param,
    )


def parse_integer(value: Any, param: str = "__root__") -> int:
    """Coerce *value* to ``int``.

    Integral floats (``3.0``) and numeric strings (``"3"``, ``" 3 "``,
    ``"3.0"``) are accepted; booleans, empty strings and fractional
    numbers are not.
    """
    if isinstance(value, bool):
        raise TypeCoercionError(f"Expected an integer, got {value!r}", param=param)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError as err:
            raise TypeCoercionError(
                f"Expected an integer, got {value!r}", param=param
            ) from err
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise TypeCoercionError(f"Expected an integer, got {value!r}", param=param)


def convert_count(count: Any) -> bool:
    """Convert the ``count`` query param."""
    return parse_boolean(count, param="count")
