"""Queries over sequences: membership, lookup by position or predicate, and counting."""

from collections import Counter
from typing import Any, Callable, Dict, Iterable, Optional, Sequence


def contains(s: Iterable, v) -> bool:
    """Return whether ``v`` occurs in ``s``."""
    return any(item == v for item in s)


def contains_any(s: Iterable, *args) -> bool:
    """Return whether any of the given values occurs in ``s``."""
    wanted = list(args)
    if not wanted:
        return False
    return any(item in wanted for item in s)


def contains_all(s: Iterable, *args) -> bool:
    """Return whether every one of the given values occurs in ``s``."""
    items = list(s)
    return all(v in items for v in args)


def any_(s: Iterable, f: Callable) -> bool:
    """Return whether at least one element satisfies ``f``; stops at the first hit."""
    return any(f(v) for v in s)


def all_(s: Iterable, f: Callable) -> bool:
    """Return whether every element satisfies ``f``; stops at the first miss."""
    return all(f(v) for v in s)


def find(s: Iterable, f: Callable, default=None):
    """Return the first element satisfying ``f``, or ``default`` if none does."""
    return next((v for v in s if f(v)), default)


def find_rev(s: Sequence, f: Callable, default=None):
    """Return the last element satisfying ``f``, or ``default`` if none does."""
    return next((v for v in reversed(s) if f(v)), default)


def index(s: Iterable, e) -> Optional[int]:
    """Return the index of the first occurrence of ``e`` in ``s``, or None."""
    return next((i for i, v in enumerate(s) if v == e), None)


def index_rev(s: Sequence, e) -> Optional[int]:
    """Return the index of the last occurrence of ``e`` in ``s``, or None."""
    return index_rev_by(s, lambda v: v == e)


def index_by(s: Iterable, f: Callable) -> Optional[int]:
    """Return the index of the first element satisfying ``f``, or None."""
    return next((i for i, v in enumerate(s) if f(v)), None)


def index_rev_by(s: Sequence, f: Callable) -> Optional[int]:
    """Return the index of the last element satisfying ``f``, or None."""
    return next(
        (i for i in range(len(s) - 1, -1, -1) if f(s[i])),
        None,
    )


def first(s: Iterable, default=None):
    """Return the first element of ``s``, or ``default`` if it is empty."""
    return next(iter(s), default)


def last(s: Sequence, default=None):
    """Return the last element of ``s``, or ``default`` if it is empty."""
    return s[-1] if len(s) else default


def get(s: Sequence, n: int, default=None):
    """Return the element at index ``n`` (negative counts from the end), or ``default``."""
    idx = int(n)
    if idx < 0:
        idx += len(s)
    if 0 <= idx < len(s):
        return s[idx]
    return default


def count(s: Iterable, v) -> int:
    """Return how many times ``v`` occurs in ``s``."""
    return sum(1 for item in s if item == v)


def count_by(s: Iterable, f: Callable) -> int:
    """Return how many elements of ``s`` satisfy ``f``."""
    return sum(1 for item in s if f(item))


def count_values(s: Iterable) -> Dict[Any, int]:
    """Return a dict mapping each distinct element of ``s`` to its number of occurrences."""
    return dict(Counter(s))


def count_values_by(s: Iterable, f: Callable) -> Dict[Any, int]:
    """Return a dict mapping each key ``f(v)`` to how many elements produced it."""
    return dict(Counter(f(v) for v in s))


def equal(s1: Optional[Sequence], s2: Optional[Sequence]) -> bool:
    """Return whether two sequences hold equal elements in order.

    None equals only None; an empty sequence does not equal None.
    """
    return equal_by(s1, s2, lambda a, b: a == b)


def equal_by(s1: Optional[Sequence], s2: Optional[Sequence], eq: Callable) -> bool:
    """Return whether two sequences are equal element-wise under ``eq``.

    None equals only None; an empty sequence does not equal None.
    """
    if (s1 is None) != (s2 is None):
        return False
    if s1 is None:
        return True
    if len(s1) != len(s2):
        return False
    return all(eq(a, b) for a, b in zip(s1, s2))