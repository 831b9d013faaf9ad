import math
import re

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence


def is_numeric(value) -> bool:
    """True if `value` converts to a finite float ('10' and 10.5 do, 'a' and nan don't)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return False

    return math.isfinite(number)

def to_pos_int(value) -> Optional[int]:
    """Best-effort conversion to a non-negative integer: -10.7 -> 10, '3' -> 3.

    Returns None when `value` has no numeric meaning.
    """
    if not is_numeric(value):
        return None

    # Ints skip the float round-trip, which would overflow or lose precision.
    if isinstance(value, int):
        return abs(value)

    return math.floor(abs(float(value)))

def is_array_like(obj) -> bool:
    if obj is None or isinstance(obj, Mapping):
        return False

    return hasattr(obj, '__len__') and hasattr(obj, '__getitem__')

def chunk(seq: Sequence[Any], size) -> List[List[Any]]:
    """Split `seq` into contiguous runs of `size` (the last may be shorter)."""
    items = list(seq)
    amount = to_pos_int(size) or 1

    return [items[i:i + amount] for i in range(0, len(items), amount)]

def clone(source, _memo=None):
    """Copy plain lists, tuples and dicts recursively; anything else is shared.

    Subclasses (namedtuples, defaultdicts, ...) are shared as they are, and
    containers that refer to themselves are copied once.
    """
    kind = type(source)
    if kind not in (dict, list, tuple):
        return source

    memo = {} if _memo is None else _memo
    if id(source) in memo:
        return memo[id(source)]

    if kind is dict:
        copy = memo[id(source)] = {}
        for key, value in source.items():
            copy[key] = clone(value, memo)
    elif kind is list:
        copy = memo[id(source)] = []
        copy.extend(clone(value, memo) for value in source)
    else:
        copy = memo[id(source)] = tuple(clone(value, memo) for value in source)

    return copy

def average(*numbers) -> float:
    if not numbers:
        return 0

    total, count = sum(numbers), len(numbers)
    try:
        return total / count
    except OverflowError:
        # Too large for a float; fall back to integer division.
        return total // count

def to_lower_first(s) -> str:
    s = str(s)
    return s[:1].lower() + s[1:]

def hyphenate(s: str, hyphen: str = '-') -> str:
    """'fontFamily' -> 'font-family'"""
    return re.sub(r'([a-z])([A-Z])',
                  lambda m: m.group(1) + hyphen + m.group(2).lower(), s)

def decamelise(name: str) -> str:
    """'FooBar' -> 'foo_bar'; snake_case names pass through."""
    return hyphenate(to_lower_first(name), '_')
