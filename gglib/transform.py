"""Element-wise transformations of sequences: mapping, filtering, folding and collecting."""

import copy
from itertools import chain
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple

from gglib import gvalue


def map_(s: Iterable, f: Callable) -> list:
    """Return a new list with ``f`` applied to each element of ``s``."""
    return [f(v) for v in s]


def try_map(s: Iterable, f: Callable) -> list:
    """Return a new list with ``f`` applied to each element of ``s``.

    The first exception raised by ``f`` stops the mapping and propagates.
    """
    result = []
    for v in s:
        result.append(f(v))
    return result


def filter_(s: Iterable, f: Callable) -> list:
    """Return the elements of ``s`` that satisfy the predicate ``f``."""
    return [v for v in s if f(v)]


def filter_map(s: Iterable, f: Callable[[Any], Tuple[Any, bool]]) -> list:
    """Map and filter at once: ``f`` returns ``(value, keep)``; kept values are collected."""
    result = []
    for v in s:
        mapped, keep = f(v)
        if keep:
            result.append(mapped)
    return result


def try_filter_map(s: Iterable, f: Callable) -> list:
    """Return ``f`` applied to each element, leaving out elements for which ``f`` raises."""
    result = []
    for v in s:
        try:
            mapped = f(v)
        except Exception:
            continue
        result.append(mapped)
    return result


def reject(s: Iterable, f: Callable) -> list:
    """Return the elements of ``s`` that do not satisfy the predicate ``f``."""
    return [v for v in s if not f(v)]


def partition(s: Iterable, f: Callable) -> Tuple[list, list]:
    """Split ``s`` into ``(satisfying, not_satisfying)`` according to ``f``."""
    accepted: list = []
    rejected: list = []
    for v in s:
        (accepted if f(v) else rejected).append(v)
    return accepted, rejected


def reduce_(s: Iterable, f: Callable, default=None):
    """Fold ``s`` with ``f`` starting from its first element.

    Returns ``default`` if ``s`` is empty.
    """
    it = iter(s)
    try:
        acc = next(it)
    except StopIteration:
        return default
    for v in it:
        acc = f(acc, v)
    return acc


def fold(s: Iterable, f: Callable, init):
    """Apply ``f(acc, v)`` cumulatively to ``s`` starting from ``init``."""
    acc = init
    for v in s:
        acc = f(acc, v)
    return acc


def flat_map(s: Iterable, f: Callable[[Any], Iterable]) -> list:
    """Apply ``f`` to each element and concatenate the resulting sequences."""
    return list(chain.from_iterable(f(v) for v in s))


def flatten(s: Iterable[Iterable]) -> list:
    """Collapse a sequence of sequences into one flat list."""
    return list(chain.from_iterable(s))


def concat(*args: Iterable) -> list:
    """Concatenate the given sequences in order."""
    return flatten(args)


def merge(*args: Iterable) -> list:
    """Alias of :func:`concat`."""
    return flatten(args)


def for_each(s: Iterable, f: Callable) -> None:
    """Call ``f(v)`` for each element of ``s``."""
    for v in s:
        f(v)


def for_each_indexed(s: Iterable, f: Callable) -> None:
    """Call ``f(i, v)`` for each element of ``s`` with its zero-based index."""
    for i, v in enumerate(s):
        f(i, v)


def type_assert(s: Iterable, typ) -> list:
    """Return the elements of ``s`` checked to be instances of ``typ``.

    Raises TypeError on the first element that is not.
    """
    return [gvalue.type_assert(v, typ) for v in s]


def indirect(s: Iterable) -> list:
    """Return the elements of ``s`` with every None left out."""
    return [v for v in s if v is not None]


def indirect_or(s: Iterable, fallback) -> list:
    """Return the elements of ``s`` with every None replaced by ``fallback``."""
    return [fallback if v is None else v for v in s]


def clone(s):
    """Return a shallow copy of ``s``; None gives None.

    Lists (and list subclasses) keep their type; other iterables give a list.
    """
    if s is None:
        return None
    if isinstance(s, list):
        return copy.copy(s)
    return list(s)


def clone_by(s, f: Callable):
    """Return a copy of ``s`` with each element copied by ``f``; None gives None."""
    if s is None:
        return None
    result = [f(v) for v in s]
    if isinstance(s, list) and type(s) is not list:
        return type(s)(result)
    return result


def repeat(v, n: int) -> list:
    """Return a list holding ``v`` exactly ``n`` times (the same object each time)."""
    if n < 0:
        raise ValueError("repeat count is negative")
    return [v] * n


def repeat_by(fn: Callable[[], Any], n: int) -> list:
    """Return a list of ``n`` values, each produced by a fresh call to ``fn``."""
    if n < 0:
        raise ValueError("repeat count is negative")
    return [fn() for _ in range(n)]


def of(*args) -> list:
    """Return the arguments as a new list."""
    return list(args)


def compact(s: Iterable) -> list:
    """Return the elements of ``s`` that are not zero values (see ``gvalue.is_zero``)."""
    return [v for v in s if gvalue.is_not_zero(v)]


def to_map(s: Iterable, f: Callable[[Any], Tuple[Any, Any]]) -> Dict:
    """Collect ``s`` into a dict whose ``(key, value)`` pairs come from ``f``."""
    result: Dict = {}
    for v in s:
        key, value = f(v)
        result[key] = value
    return result


def to_map_values(s: Iterable, f: Callable) -> Dict:
    """Collect ``s`` into a dict keyed by ``f(v)``; later elements win on equal keys."""
    return {f(v): v for v in s}


def group_by(s: Sequence, f: Callable) -> Dict[Any, List]:
    """Group the elements of ``s`` into lists keyed by ``f(v)``, keeping their order."""
    result: Dict[Any, List] = {}
    for v in s:
        result.setdefault(f(v), []).append(v)
    return result