"""Re-ordering of sequences: sorting, reversing and shuffling."""

from functools import cmp_to_key
from typing import Callable, MutableSequence, Sequence

from gglib import fastrand


def _key_from_less(less: Callable) -> Callable:
    def compare(a, b) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


def sort(s: MutableSequence) -> None:
    """Sort ``s`` in ascending order, in place."""
    s[:] = sorted(s)


def sort_clone(s: Sequence) -> list:
    """Return a new list with the elements of ``s`` in ascending order."""
    return sorted(s)


def sort_by(s: MutableSequence, less: Callable) -> None:
    """Sort ``s`` in place using the ordering predicate ``less(a, b)``."""
    s[:] = sorted(s, key=_key_from_less(less))


def sort_clone_by(s: Sequence, less: Callable) -> list:
    """Return a new list of ``s`` sorted with the predicate ``less(a, b)``."""
    return sorted(s, key=_key_from_less(less))


def stable_sort_by(s: MutableSequence, less: Callable) -> None:
    """Sort ``s`` in place with ``less``, keeping equal elements in their order."""
    s[:] = sorted(s, key=_key_from_less(less))


def reverse(s: MutableSequence) -> None:
    """Reverse the elements of ``s`` in place."""
    s[:] = s[::-1]


def reverse_clone(s: Sequence) -> list:
    """Return a new list with the elements of ``s`` in reverse order."""
    return list(reversed(s))


def shuffle(s: MutableSequence) -> None:
    """Pseudo-randomly reorder the elements of ``s`` in place."""
    fastrand.shuffle_in_place(s)


def shuffle_clone(s: Sequence) -> list:
    """Return a new list with the elements of ``s`` in pseudo-random order."""
    result = list(s)
    fastrand.shuffle_in_place(result)
    return result