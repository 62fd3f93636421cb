"""Positional operations on sequences: chunking, slicing, inserting and removing."""

from typing import Iterable, List, Optional, Sequence, Tuple

from gglib.transform import clone


def _normalize_index(s: Sequence, n: int) -> Tuple[int, bool]:
    """Turn a possibly negative index into a positive one.

    The flag tells whether the result lies in ``[0, len(s))``.
    """
    m = int(n)
    if m < 0:
        m += len(s)
    return m, 0 <= m < len(s)


def chunk(s: Sequence, size: int) -> List[list]:
    """Split ``s`` into lists of length ``size``; the last one may be shorter."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    items = list(s)
    return [items[i:i + size] for i in range(0, len(items), size)]


def divide(s: Sequence, n: int) -> List[list]:
    """Split ``s`` into exactly ``n`` lists whose lengths differ by at most one.

    The earlier lists take the extra elements when ``n`` does not divide the length.
    """
    if n <= 0:
        raise ValueError("number of parts must be positive")
    items = list(s)
    base, extra = divmod(len(items), n)
    parts = []
    start = 0
    for part in range(n):
        end = start + base + (1 if part < extra else 0)
        parts.append(items[start:end])
        start = end
    return parts


def take(s: Sequence, n: int) -> list:
    """Return the first ``n`` elements of ``s``, or all of them if there are fewer."""
    if n < 0:
        raise ValueError("count must not be negative")
    return list(s[:n])


def drop(s: Sequence, n: int) -> list:
    """Return ``s`` without its first ``n`` elements; empty if there are fewer."""
    if n < 0:
        raise ValueError("count must not be negative")
    return list(s[n:])


def slice_(s: Sequence, start: int, end: int) -> list:
    """Return the elements in ``[start, end)`` without ever raising on range.

    Negative indexes count from the end; a negative ``start`` with ``end == 0``
    means "up to the end".
    """
    start_idx, _ = _normalize_index(s, start)
    if start < 0 and end == 0:
        end_idx = len(s)
    else:
        end_idx, _ = _normalize_index(s, end)
    start_idx = max(start_idx, 0)
    end_idx = min(end_idx, len(s))
    if start_idx >= end_idx:
        return []
    return list(s[start_idx:end_idx])


def insert(s: Optional[Sequence], pos: int, *args) -> Optional[list]:
    """Return a new list with ``args`` inserted before position ``pos``.

    Negative positions count from the end; out-of-range positions are clamped.
    With nothing to insert, a copy of ``s`` is returned (None stays None).
    """
    if not args:
        return clone(s)
    items = [] if s is None else list(s)
    idx, _ = _normalize_index(items, pos)
    idx = min(max(idx, 0), len(items))
    return items[:idx] + list(args) + items[idx:]


def remove(s: Iterable, v) -> list:
    """Return a new list with every element equal to ``v`` left out."""
    return [item for item in s if item != v]


def remove_index(s: Sequence, index: int) -> list:
    """Return a new list without the element at ``index``.

    Negative indexes count from the end; an out-of-range index gives a copy of ``s``.
    """
    idx, ok = _normalize_index(s, index)
    if not ok:
        return list(s)
    return list(s[:idx]) + list(s[idx + 1:])