"""Data path resolution for interpolations.

A path is a dotted identifier such as `user.address.city`. Each segment is
resolved against the previous value: mappings by key, other objects
(dataclasses, plain classes) by public attribute. Anything that is missing
or falsy along the way ends the lookup and renders as an empty string.
"""

import math
import re
from collections.abc import Mapping
from numbers import Number
from typing import Any

# Identifier segments; "$" is allowed alongside letters, digits and "_".
PATH_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*(?:\.[A-Za-z_$][A-Za-z0-9_$]*)*")


class _Missing:
    """Sentinel for a path that did not resolve."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def is_dotted_path(expr: str) -> bool:
    """Check whether an expression is a plain dotted identifier path."""
    return PATH_PATTERN.fullmatch(expr) is not None


def split_path(expr: str) -> tuple[str, ...]:
    """Split an expression into lookup segments.

    Anything that is not a dotted path is kept whole as a single key. It
    will almost never exist in the data and so degrades to "".
    """
    if is_dotted_path(expr):
        return tuple(expr.split("."))
    return (expr,)


def is_empty(value: Any) -> bool:
    """Values that render as "": missing, None, False, zero, NaN, ""."""
    if value is MISSING or value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Number) and not isinstance(value, bool):
        try:
            return value == 0 or (isinstance(value, float) and math.isnan(value))
        except TypeError:
            return False
    return False


def _get(obj: Any, key: str) -> Any:
    """Get one segment from a mapping or object.

    Attribute access is limited to public, non-callable attributes so a
    template can't reach methods or dunder internals.
    """
    if isinstance(obj, Mapping):
        return obj.get(key, MISSING)

    if isinstance(obj, (str, bytes, Number)) or key.startswith("_"):
        return MISSING

    value = getattr(obj, key, MISSING)
    if callable(value):
        return MISSING
    return value


def lookup(data: Any, segments: tuple[str, ...]) -> Any:
    """Resolve path segments against a data context.

    Returns MISSING as soon as any intermediate value is missing or falsy.
    """
    value = data
    for segment in segments:
        if is_empty(value):
            return MISSING
        value = _get(value, segment)
    return value


def to_text(value: Any) -> str:
    """Convert a looked-up value to output text, coalescing empties to ""."""
    if is_empty(value):
        return ""
    return str(value)
