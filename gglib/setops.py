"""Set-like operations on sequences that keep the order of first occurrence."""

from typing import Callable, Iterable, List


def uniq(s: Iterable) -> list:
    """Return the distinct elements of ``s`` in order of first occurrence."""
    return list(dict.fromkeys(s))


def uniq_by(s: Iterable, f: Callable) -> list:
    """Return the elements of ``s`` whose key ``f(v)`` is seen for the first time."""
    seen = set()
    result = []
    for v in s:
        key = f(v)
        if key not in seen:
            seen.add(key)
            result.append(v)
    return result


def dup(s: Iterable) -> list:
    """Return the repeated elements of ``s`` in order of their first recurrence."""
    return dup_by(s, lambda v: v)


def dup_by(s: Iterable, f: Callable) -> list:
    """Return elements whose key ``f(v)`` repeats, in order of first recurrence.

    The element returned for each key is the one that recurred first.
    """
    seen = set()
    reported = set()
    result = []
    for v in s:
        key = f(v)
        if key in seen:
            if key not in reported:
                reported.add(key)
                result.append(v)
        else:
            seen.add(key)
    return result


def union(*args: Iterable) -> list:
    """Return the distinct elements of all given sequences in order of first occurrence."""
    result: dict = {}
    for s in args:
        result.update(dict.fromkeys(s))
    return list(result)


def intersect(*args: Iterable) -> list:
    """Return the distinct elements present in every given sequence.

    Elements keep the order of their first occurrence in the first sequence.
    """
    if not args:
        return []
    first: List = list(args[0])
    members = set(first)
    for s in args[1:]:
        if not members:
            break
        members &= set(s)
    return [v for v in uniq(first) if v in members]


def diff(s: Iterable, *args: Iterable) -> list:
    """Return the distinct elements of ``s`` found in none of the other sequences."""
    excluded = set()
    for other in args:
        excluded.update(other)
    return [v for v in uniq(s) if v not in excluded]