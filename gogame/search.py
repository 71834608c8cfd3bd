"""Searching and sorting of move lists.

Functions that look for a value return its index, or ``None`` when it is
absent. Functions that need sorted input raise ``ValueError`` otherwise.
"""

from bisect import bisect_left
from itertools import pairwise


def linear_search(data, value):
    """Return the index of the first element equal to ``value``, or None."""
    return next((index for index, item in enumerate(data) if item == value), None)


def _require_nonempty(data):
    if not data:
        raise ValueError("sequence is empty")


def _require_sorted(data):
    if not is_sorted(data):
        raise ValueError("sequence is not sorted")


def unsorted_find_smallest(data):
    """Return the index of the first smallest element."""
    _require_nonempty(data)
    return min(range(len(data)), key=data.__getitem__)


def unsorted_find_largest(data):
    """Return the index of the first largest element."""
    _require_nonempty(data)
    return max(range(len(data)), key=data.__getitem__)


def sort_moves(data):
    """Sort ``data`` in place in ascending order."""
    data.sort()


def is_sorted(data):
    """Return True if no element is smaller than the one before it."""
    return all(not (following < current) for current, following in pairwise(data))


def sorted_find_smallest(data):
    """Return the index of the smallest element of a sorted sequence."""
    _require_sorted(data)
    _require_nonempty(data)
    return 0


def sorted_find_largest(data):
    """Return the index of the largest element of a sorted sequence."""
    _require_sorted(data)
    _require_nonempty(data)
    return len(data) - 1


def binary_search(data, value):
    """Return the index of some element equal to ``value`` in sorted data, or None."""
    _require_sorted(data)
    low, high = 0, len(data) - 1
    while low <= high:
        mid = (low + high) // 2
        if value == data[mid]:
            return mid
        if value < data[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search_first(data, value):
    """Return the index of the first element equal to ``value`` in sorted data, or None."""
    _require_sorted(data)
    index = bisect_left(data, value)
    if index < len(data) and data[index] == value:
        return index
    return None