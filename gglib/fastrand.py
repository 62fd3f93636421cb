"""Pseudo-random numbers: bounded integers, floats, byte strings and shuffles."""

import random
from typing import Callable, MutableSequence

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_MAX_INT31 = (1 << 31) - 1
_MAX_INT63 = (1 << 63) - 1

_WY_INCREMENT = 0xA0761D6478BD642F
_WY_MIX = 0xE7037ED1A0B428DB

_rng = random.Random()


def uint32() -> int:
    """Return a pseudo-random 32-bit unsigned integer."""
    return _rng.getrandbits(32)


def uint64() -> int:
    """Return a pseudo-random 64-bit unsigned integer."""
    return _rng.getrandbits(64)


def int31() -> int:
    """Return a non-negative pseudo-random 31-bit integer."""
    return uint32() & _MAX_INT31


def int63() -> int:
    """Return a non-negative pseudo-random 63-bit integer."""
    return uint64() & _MAX_INT63


def int63n(n: int) -> int:
    """Return a pseudo-random integer in ``[0, n)``; ``n`` must be a positive int63."""
    if n <= 0 or n > _MAX_INT63:
        raise ValueError("invalid argument to Int63n")
    if n & (n - 1) == 0:
        return int63() & (n - 1)
    limit = _MAX_INT63 - (1 << 63) % n
    v = int63()
    while v > limit:
        v = int63()
    return v % n


def int31n(n: int) -> int:
    """Return a pseudo-random integer in ``[0, n)``; ``n`` must be a positive int31.

    Uses multiply-and-shift reduction with rejection to avoid bias.
    """
    if n <= 0 or n > _MAX_INT31:
        raise ValueError("invalid argument to Int31n")
    prod = uint32() * n
    low = prod & _MASK32
    if low < n:
        thresh = ((-n) & _MASK32) % n
        while low < thresh:
            prod = uint32() * n
            low = prod & _MASK32
    return prod >> 32


def intn(n: int) -> int:
    """Return a pseudo-random integer in ``[0, n)``; ``n`` must be positive."""
    if n <= 0:
        raise ValueError("invalid argument to Intn")
    if n <= _MAX_INT31:
        return int31n(n)
    return int63n(n)


def float64() -> float:
    """Return a pseudo-random float in ``[0.0, 1.0)`` with 53 bits of precision."""
    return int63n(1 << 53) / (1 << 53)


def float32() -> float:
    """Return a pseudo-random float in ``[0.0, 1.0)`` with 24 bits of precision."""
    return int31n(1 << 24) / (1 << 24)


def uint32n(n: int) -> int:
    """Return a pseudo-random integer in ``[0, n)`` for a 32-bit unsigned ``n``."""
    return (uint32() * (n & _MASK32)) >> 32


def uint64n(n: int) -> int:
    """Return a pseudo-random integer in ``[0, n)`` for a 64-bit unsigned ``n``."""
    return uint64() % n


class _WyRand:
    """Small fast generator used to fill byte strings."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK64

    def next64(self) -> int:
        self._state = (self._state + _WY_INCREMENT) & _MASK64
        prod = self._state * (self._state ^ _WY_MIX)
        return ((prod >> 64) ^ prod) & _MASK64


def read(n: int) -> bytes:
    """Return ``n`` pseudo-random bytes."""
    if n < 0:
        raise ValueError("negative byte count")
    if n == 0:
        return b""
    gen = _WyRand(uint32())
    out = bytearray()
    full, rest = divmod(n, 8)
    for _ in range(full):
        out += gen.next64().to_bytes(8, "little")
    for remaining in range(rest, 0, -1):
        out.append((gen.next64() >> (remaining * 8)) & 0xFF)
    return bytes(out)


def _fisher_yates(n: int, swap: Callable[[int, int], None]) -> None:
    i = n - 1
    while i > _MAX_INT31 - 1:
        swap(i, int63n(i + 1))
        i -= 1
    while i > 0:
        swap(i, int31n(i + 1))
        i -= 1


def shuffle(n: int, swap: Callable[[int, int], None]) -> None:
    """Shuffle ``n`` elements by calling ``swap(i, j)``; ``n`` must not be negative."""
    if n < 0:
        raise ValueError("invalid argument to Shuffle")
    _fisher_yates(n, swap)


def shuffle_in_place(s: MutableSequence) -> None:
    """Pseudo-randomly reorder the mutable sequence ``s`` in place."""

    def swap(i: int, j: int) -> None:
        s[i], s[j] = s[j], s[i]

    _fisher_yates(len(s), swap)


def perm(n: int) -> list:
    """Return a pseudo-random permutation of ``range(n)`` as a list."""
    if n < 0:
        raise ValueError("invalid argument to Perm")
    m = [0] * n
    for i in range(1, n):
        j = intn(i + 1)
        m[i] = m[j]
        m[j] = i
    return m