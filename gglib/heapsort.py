"""In-place heap sort for lists of ordered values."""


def _sift_down(v, node, end):
    """Restore the max-heap property below ``node`` within ``v[:end]``."""
    while True:
        child = 2 * node + 1
        if child >= end:
            return
        if child + 1 < end and v[child] < v[child + 1]:
            child += 1
        if v[node] >= v[child]:
            return
        v[node], v[child] = v[child], v[node]
        node = child


def sort(v) -> None:
    """Sort the mutable sequence ``v`` in ascending order, in place."""
    n = len(v)
    for i in range((n - 1) // 2, -1, -1):
        _sift_down(v, i, n)
    for end in range(n - 1, 0, -1):
        v[0], v[end] = v[end], v[0]
        _sift_down(v, 0, end)