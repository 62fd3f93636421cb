"""Helpers for sequences, values, JSON text and pseudo-random numbers."""

__version__ = "0.1.0"

__all__ = [
    "aggregate",
    "fastrand",
    "gson",
    "gvalue",
    "heapsort",
    "ordering",
    "search",
    "setops",
    "slicing",
    "transform",
]