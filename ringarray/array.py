"""A fixed-capacity circular array that overwrites its oldest element when full."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional

_MISSING = object()


class CircularArray:
    """Double-ended ring buffer of fixed capacity with random access.

    Pushing onto a full array at the back drops the front element; pushing
    at the front of a full array overwrites the front element.
    """

    __slots__ = ("_capacity", "_slots", "_first", "_last")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError("capacity must be an integer")
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        # One slot more than the capacity distinguishes full from empty.
        self._slots: list[Any] = [None] * (capacity + 1)
        self._first = 0
        self._last = 0
        self.assign(values)

    @classmethod
    def filled(cls, capacity: int, count: int, value: Any) -> "CircularArray":
        """Create an array holding ``count`` copies of ``value``."""
        array = cls(capacity)
        array.resize(count, value)
        return array

    # -- ring arithmetic --------------------------------------------------

    @property
    def _period(self) -> int:
        return self._capacity + 1

    def _next(self, position: int, count: int = 1) -> int:
        return (position + count) % self._period

    def _prev(self, position: int, count: int = 1) -> int:
        return (position - count) % self._period

    def _slot(self, index: int) -> int:
        return self._next(self._first, index)

    def _normalize(self, index: int, allow_end: bool = False) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("index must be an integer")
        size = len(self)
        if index < 0:
            index += size
        upper = size if allow_end else size - 1
        if not 0 <= index <= upper:
            raise IndexError("index out of range")
        return index

    # -- state ------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """The maximum number of elements held."""
        return self._capacity

    @property
    def full(self) -> bool:
        """True when the array holds ``capacity`` elements."""
        return self._next(self._last) == self._first

    @property
    def front(self) -> Any:
        """The first element."""
        if not self:
            raise IndexError("front of empty array")
        return self._slots[self._first]

    @property
    def back(self) -> Any:
        """The last element."""
        if not self:
            raise IndexError("back of empty array")
        return self._slots[self._prev(self._last)]

    def __len__(self) -> int:
        return (self._last - self._first) % self._period

    def __bool__(self) -> bool:
        return self._first != self._last

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self)[index]
        return self._slots[self._slot(self._normalize(index))]

    def __setitem__(self, index: int, value: Any) -> None:
        self._slots[self._slot(self._normalize(index))] = value

    def __iter__(self) -> Iterator[Any]:
        position = self._first
        while position != self._last:
            yield self._slots[position]
            position = self._next(position)

    def __reversed__(self) -> Iterator[Any]:
        position = self._last
        while position != self._first:
            position = self._prev(position)
            yield self._slots[position]

    # -- comparison -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularArray):
            return NotImplemented
        return list(self) == list(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CircularArray):
            return NotImplemented
        return list(self) < list(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CircularArray):
            return NotImplemented
        return list(self) <= list(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CircularArray):
            return NotImplemented
        return list(self) > list(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CircularArray):
            return NotImplemented
        return list(self) >= list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._capacity}, {list(self)!r})"

    # -- bulk operations --------------------------------------------------

    def copy(self) -> "CircularArray":
        """Return a new array of the same capacity and contents."""
        return type(self)(self._capacity, self)

    def assign(self, values: Iterable[Any]) -> None:
        """Replace the contents; only the last ``capacity`` values remain."""
        if values is self:
            return
        items = list(values)
        self.clear()
        self.push_back(*items)

    def clear(self) -> None:
        """Remove every element."""
        self._last = self._first

    def reset(self) -> None:
        """Remove every element and rewind to the start of storage."""
        self._first = self._last = 0

    def resize(self, size: int, fill: Any = _MISSING) -> None:
        """Change the size; new slots take ``fill`` or whatever they last held."""
        if size < 0 or size > self._capacity:
            raise ValueError("size must lie between 0 and the capacity")
        if fill is not _MISSING:
            for _ in range(size - len(self)):
                self.push_back(fill)
        self._last = self._next(self._first, size)

    # -- pushing and popping ----------------------------------------------

    def push_back(self, *args: Any) -> None:
        """Append values; when full, the front element is dropped."""
        for value in args:
            self._slots[self._last] = value
            self._last = self._next(self._last)
            if self._last == self._first:
                self._first = self._next(self._first)

    def push_front(self, *args: Any) -> None:
        """Prepend values one by one; when full, the front is overwritten."""
        for value in args:
            if not self.full:
                self._first = self._prev(self._first)
            self._slots[self._first] = value

    def pop_back(self, count: int = 1) -> None:
        """Remove ``count`` elements from the back."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > len(self):
            raise IndexError("pop from array with too few elements")
        self._last = self._prev(self._last, count)

    def pop_front(self, count: int = 1) -> None:
        """Remove ``count`` elements from the front."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > len(self):
            raise IndexError("pop from array with too few elements")
        self._first = self._next(self._first, count)

    # -- insertion --------------------------------------------------------

    def _insert_one(self, index: int, value: Any) -> int:
        if self.full:
            self.pop_front()
            index = max(index - 1, 0)
        size = len(self)
        if index <= size - index:
            self._first = self._prev(self._first)
            for k in range(index):
                self._slots[self._slot(k)] = self._slots[self._slot(k + 1)]
        else:
            self._last = self._next(self._last)
            for k in range(size, index, -1):
                self._slots[self._slot(k)] = self._slots[self._slot(k - 1)]
        self._slots[self._slot(index)] = value
        return index

    def _insert_many(self, index: int, values: Iterable[Any]) -> int:
        count = 0
        for value in values:
            index = self._insert_one(index, value) + 1
            count += 1
        return max(index - count, 0)

    def insert(self, index: int, *args: Any) -> int:
        """Insert values before ``index``; return the index of the first one."""
        index = self._normalize(index, allow_end=True)
        return self._insert_many(index, args)

    def insert_range(self, index: int, values: Iterable[Any]) -> int:
        """Insert an iterable before ``index``; return the index of the first."""
        index = self._normalize(index, allow_end=True)
        return self._insert_many(index, values)

    def append_range(self, values: Iterable[Any]) -> None:
        """Push every value at the back."""
        self.push_back(*values)

    def prepend_range(self, values: Iterable[Any]) -> None:
        """Put the values at the front, keeping their order."""
        self.push_front(*reversed(list(values)))

    # -- removal ----------------------------------------------------------

    def erase(self, start: int, stop: Optional[int] = None) -> int:
        """Remove one element, or ``[start, stop)``; return the following index."""
        size = len(self)
        if stop is None:
            start = self._normalize(start)
            stop = start + 1
        else:
            start = self._normalize(start, allow_end=True)
            stop = self._normalize(stop, allow_end=True)
            if stop < start:
                raise IndexError("erase range is reversed")
        count = stop - start
        if count == 0:
            return start
        if start <= size - stop:
            for k in range(start - 1, -1, -1):
                self._slots[self._slot(k + count)] = self._slots[self._slot(k)]
            self._first = self._next(self._first, count)
        else:
            for k in range(stop, size):
                self._slots[self._slot(k - count)] = self._slots[self._slot(k)]
            self._last = self._prev(self._last, count)
        return start

    # -- misc -------------------------------------------------------------

    def swap(self, other: "CircularArray") -> None:
        """Exchange the whole state with another array."""
        for name in self.__slots__:
            mine, theirs = getattr(self, name), getattr(other, name)
            setattr(self, name, theirs)
            setattr(other, name, mine)

    def append(self, values: Iterable[Any]) -> int:
        """Append as many values as fit without overwriting; return the count."""
        room = self._capacity - len(self)
        taken = list(islice(values, room))
        self.push_back(*taken)
        return len(taken)

    def split(self) -> tuple[list[Any], ...]:
        """Return the contents as the contiguous storage segments they occupy."""
        if self._first < self._last:
            return (self._slots[self._first:self._last],)
        if self._first > self._last:
            return (self._slots[self._first:], self._slots[: self._last])
        return ()

    def sort(
        self, key: Optional[Callable[[Any], Any]] = None, reverse: bool = False
    ) -> None:
        """Sort the elements in place."""
        self._rewrite(sorted(self, key=key, reverse=reverse))

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._rewrite(list(reversed(self)))

    def _rewrite(self, items: list[Any]) -> None:
        for offset, value in enumerate(items):
            self._slots[self._slot(offset)] = value