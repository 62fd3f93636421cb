"""Generic helpers for single values: bounds, comparisons, zero values and type checks."""

import threading
from typing import Any, Callable, Tuple, TypeVar

T = TypeVar("T")

_SCALAR_TYPES = (bool, int, float, complex, str, bytes)


def zero(typ):
    """Return the zero value of ``typ``.

    Scalars give 0, 0.0, 0j, False, "" or b""; every other type gives None.
    """
    if isinstance(typ, type) and issubclass(typ, _SCALAR_TYPES):
        try:
            return typ()
        except TypeError:
            return None
    return None


def max_(x, *args):
    """Return the largest of the given values; the first one wins on ties."""
    result = x
    for v in args:
        if v > result:
            result = v
    return result


def min_(x, *args):
    """Return the smallest of the given values; the first one wins on ties."""
    result = x
    for v in args:
        if v < result:
            result = v
    return result


def min_max(x, *args) -> Tuple[Any, Any]:
    """Return ``(minimum, maximum)`` of the given values."""
    lo = hi = x
    for v in args:
        if lo > v:
            lo = v
        elif hi < v:
            hi = v
    return lo, hi


def clamp(value, lo, hi):
    """Return ``value`` limited to the closed range ``[lo, hi]``."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def is_nil(v) -> bool:
    """Return whether ``v`` is None."""
    return v is None


def is_not_nil(v) -> bool:
    """Return whether ``v`` is not None."""
    return v is not None


def is_zero(v) -> bool:
    """Return whether ``v`` equals the zero value of its own type."""
    z = zero(type(v))
    if z is None:
        return v is None
    return v == z


def is_not_zero(v) -> bool:
    """Negation of :func:`is_zero`."""
    return not is_zero(v)


def equal(x, y) -> bool:
    """Return whether ``x == y``."""
    return x == y


def add(x, y):
    """Return ``x + y``; strings are concatenated."""
    return x + y


def _type_name(typ) -> str:
    return getattr(typ, "__name__", repr(typ))


def type_assert(v, typ):
    """Return ``v`` if it is an instance of ``typ``, otherwise raise TypeError."""
    if typ is Any or typ is object or isinstance(v, typ):
        return v
    raise TypeError(
        f"interface conversion: {type(v).__name__} is not {_type_name(typ)}"
    )


def try_assert(v, typ) -> Tuple[Any, bool]:
    """Return ``(v, True)`` if ``v`` is a ``typ``, else ``(zero(typ), False)``."""
    if typ is Any or typ is object or isinstance(v, typ):
        return v, True
    return zero(typ), False


def less(x, y) -> bool:
    """Return whether ``x < y``."""
    return x < y


def less_equal(x, y) -> bool:
    """Return whether ``x <= y``."""
    return x <= y


def greater(x, y) -> bool:
    """Return whether ``x > y``."""
    return x > y


def greater_equal(x, y) -> bool:
    """Return whether ``x >= y``."""
    return x >= y


def between(v, lo, hi) -> bool:
    """Return whether ``v`` lies within the closed range ``[lo, hi]``."""
    return lo <= v <= hi


def once(f: Callable[[], T]) -> Callable[[], T]:
    """Return a getter that calls ``f`` on first use only and caches its result.

    The getter is safe to call from several threads. If ``f`` raises, the
    getter is still considered done and later calls return None.
    """
    lock = threading.Lock()
    done = False
    result = None

    def getter():
        nonlocal done, result
        if not done:
            with lock:
                if not done:
                    try:
                        result = f()
                    finally:
                        done = True
        return result

    return getter