"""Aggregates over sequences: extremes, sums and means."""

from typing import Any, Callable, Iterable, Optional, Tuple


def _best(s: Iterable, better: Callable[[Any, Any], bool], default):
    """Return the element that no later element is ``better`` than, or ``default``."""
    it = iter(s)
    try:
        result = next(it)
    except StopIteration:
        return default
    for v in it:
        if better(v, result):
            result = v
    return result


def max_(s: Iterable, default=None):
    """Return the largest element of ``s``, or ``default`` if it is empty."""
    return _best(s, lambda v, cur: v > cur, default)


def max_by(s: Iterable, less: Callable[[Any, Any], bool], default=None):
    """Return the largest element of ``s`` under ``less(a, b)``, or ``default``."""
    return _best(s, lambda v, cur: less(cur, v), default)


def min_(s: Iterable, default=None):
    """Return the smallest element of ``s``, or ``default`` if it is empty."""
    return _best(s, lambda v, cur: v < cur, default)


def min_by(s: Iterable, less: Callable[[Any, Any], bool], default=None):
    """Return the smallest element of ``s`` under ``less(a, b)``, or ``default``."""
    return _best(s, lambda v, cur: less(v, cur), default)


def min_max(s: Iterable) -> Optional[Tuple[Any, Any]]:
    """Return ``(minimum, maximum)`` of ``s``, or None if it is empty."""
    return min_max_by(s, lambda a, b: a < b)


def min_max_by(s: Iterable, less: Callable[[Any, Any], bool]) -> Optional[Tuple[Any, Any]]:
    """Return ``(minimum, maximum)`` of ``s`` under ``less(a, b)``, or None if empty."""
    it = iter(s)
    try:
        lo = hi = next(it)
    except StopIteration:
        return None
    for v in it:
        if less(v, lo):
            lo = v
        elif less(hi, v):
            hi = v
    return lo, hi


def sum_(s: Iterable):
    """Return the arithmetic sum of the elements of ``s`` (0 when empty)."""
    return sum(s)


def sum_by(s: Iterable, f: Callable):
    """Return the sum of ``f(v)`` over the elements of ``s``."""
    return sum(f(v) for v in s)


def avg(s: Iterable) -> float:
    """Return the arithmetic mean of ``s`` as a float (0.0 when empty)."""
    return avg_by(s, lambda v: v)


def avg_by(s: Iterable, f: Callable) -> float:
    """Return the arithmetic mean of ``f(v)`` over ``s`` (0.0 when empty)."""
    total = 0
    n = 0
    for v in s:
        total += f(v)
        n += 1
    if n == 0:
        return 0.0
    return float(total) / n