"""Small value helpers.

Plain functions over the values passed in. Nothing here patches or
extends built-in types.
"""

import math
import re
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def items_after(seq: Sequence[T], index: int) -> Sequence[T]:
    """Elements after position `index` (exclusive)."""
    return seq[index + 1:]


def unique(items: Iterable[H]) -> list[H]:
    """De-duplicate, keeping first occurrence order."""
    return list(dict.fromkeys(items))


def floor(number: float) -> int:
    return math.floor(number)


def times(count: int, callback: Callable[[int], Any]) -> None:
    """Call callback(i) for i in 0..count-1."""
    for i in range(count):
        callback(i)


def to_number(text: str) -> int | None:
    """Parse a leading base-10 integer, ignoring anything after it.

    "42px" -> 42, "  -7" -> -7, "px" -> None
    """
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def text_before(text: str, needle: str) -> str:
    """Text before the first `needle`, or "" if it doesn't occur."""
    index = text.find(needle)
    if index == -1:
        return ""
    return text[:index]


def text_after(text: str, needle: str) -> str:
    """Text after the first `needle`, or the whole text if it doesn't occur."""
    index = text.find(needle)
    if index == -1:
        return text
    return text[index + len(needle):]


def contains(text: str, needle: str) -> bool:
    return needle in text
