import enum
from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def natural_order(a, b) -> Ordering:
    """Compares two keys with the < operator"""
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse_order(a, b) -> Ordering:
    return natural_order(b, a)


def key_order(key: Callable[[Any], Any]) -> Comparator:
    """Builds a comparator that orders keys by key(k), like sorted(key=...)

    Args:
        key (Callable): function mapping a stored key to a sortable value

    Returns:
        Comparator: comparator over the original keys
    """
    def compare(a, b) -> Ordering:
        return natural_order(key(a), key(b))
    return compare
