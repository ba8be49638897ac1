"""Searching, erasing and copying helpers for circular arrays."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Optional

from ringarray.array import CircularArray


def erase_if(array: CircularArray, predicate: Callable[[Any], bool]) -> int:
    """Remove every element for which ``predicate`` holds; return how many."""
    kept = [value for value in array if not predicate(value)]
    removed = len(array) - len(kept)
    if removed:
        array.assign(kept)
    return removed


def erase(array: CircularArray, *args: Any) -> int:
    """Remove every element equal to any of ``args``; return how many."""
    if not args:
        raise TypeError("erase() needs at least one value to remove")
    return erase_if(array, lambda value: any(value == key for key in args))


def find_if(
    array: CircularArray, predicate: Callable[[Any], bool]
) -> Optional[int]:
    """Return the index of an element for which ``predicate`` holds, or None.

    Each storage segment is scanned from both ends towards its middle, so
    the match found is not necessarily the first one.
    """
    offset = 0
    for segment in array.split():
        low, high = 0, len(segment) - 1
        while low < high:
            if predicate(segment[low]):
                return offset + low
            if predicate(segment[high]):
                return offset + high
            low += 1
            high -= 1
        if low == high and predicate(segment[low]):
            return offset + low
        offset += len(segment)
    return None


def find(array: CircularArray, *args: Any) -> Optional[int]:
    """Return the index of an element equal to any of ``args``, or None."""
    if not args:
        raise TypeError("find() needs at least one value to look for")
    return find_if(array, lambda value: any(value == key for key in args))


def copy_to(array: CircularArray, size: Optional[int] = None) -> list[Any]:
    """Return the elements in order, at most ``size`` of them if given."""
    if size is not None and size < 0:
        raise ValueError("size must not be negative")
    return list(islice(array, size))