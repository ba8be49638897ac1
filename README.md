# ringarray

`ringarray` provides a fixed-capacity circular array. You can add or remove
elements cheaply at both ends, and you can reach any element by index.

When the array is full, the two ends behave differently:

- A value pushed at the back drops the oldest element at the front.
- A value pushed at the front overwrites the current front element.

The package uses only the standard library.

## Installation

```
pip install .
```

## Usage

```python
from ringarray.array import CircularArray
from ringarray.algorithms import erase, erase_if, find, copy_to

ring = CircularArray(3)
ring.push_front(1)
ring.push_back(2, 3)      # several values in one call
ring.push_front(4)        # full: overwrites the front element
ring.sort()
print(list(ring), ring.full)   # [2, 3, 4] True

ring.push_back(5, 10)     # full: the oldest elements are dropped
for chunk in ring.split():  # the contiguous stretches of storage
    print(chunk)

ring.erase(1)             # remove the element at index 1
print(len(ring), ring[0])

erase(ring, 10, 9, 8)     # remove every element equal to any of these
erase_if(ring, lambda v: v % 2 == 0)
print(find(ring, 5))      # an index of a match, or None
print(copy_to(ring))      # the contents as a plain list
```

## `CircularArray`

### Building

- `CircularArray(capacity, values=())` creates an array.
  - `capacity` must be a positive integer.
  - Only the last `capacity` of `values` are kept.
- `CircularArray.filled(capacity, count, value)` creates an array holding
  `count` copies of `value`.

### State

- `len()`, truth testing, and the properties `capacity` and `full`.
- The properties `front` and `back` raise `IndexError` when the array is empty.

### Access

- Indexing with integers. Negative indexes count from the end.
- Slicing returns a list.
- Assignment by index.
- Iteration forwards, and backwards with `reversed()`.

### Adding elements

- `push_back(*values)` appends values.
- `push_front(*values)` prepends values one at a time.
- `append_range(values)` pushes every value at the back.
- `prepend_range(values)` puts the values at the front and keeps their order.
- `insert(index, *values)` inserts values before `index` and returns the index
  of the first inserted value.
- `insert_range(index, values)` does the same for an iterable.
- `append(values)` appends only as many values as fit without overwriting, and
  returns how many it took.

### Removing elements

- `pop_back(count=1)` and `pop_front(count=1)` remove elements from either end.
  They raise `IndexError` if there are too few elements.
- `erase(start, stop=None)` removes one element, or the range `[start, stop)`,
  and returns the index that follows.
- `clear()` empties the array. `reset()` also rewinds the array to the start of
  its storage.

### Replacing and resizing

- `assign(values)` replaces the contents.
- `resize(size, fill=...)` changes the size to any value from 0 up to the
  capacity.
  - When `fill` is given, new positions are filled with it.
  - Otherwise they hold whatever their storage last held.

### Other operations

- `copy()` returns a new array with the same capacity and contents.
- `swap(other)` exchanges the whole state with another array.
- `split()` returns the contents as one or two lists. Each list is a stretch
  that lies contiguously in storage.
- `sort(key=None, reverse=False)` and `reverse()` rearrange the elements in
  place.
- The comparison operators `==`, `<`, `<=`, `>`, `>=` compare element by
  element, like lists. Arrays are not hashable.

## `ringarray.algorithms`

- `erase_if(array, predicate)` removes every element for which `predicate` is
  true, and returns how many it removed.
- `erase(array, *values)` removes every element equal to any of `values`, and
  returns how many it removed.
- `find_if(array, predicate)` returns the index of an element that matches, or
  `None`.
  - Each storage segment is scanned from both ends towards its middle, so the
    match is not necessarily the first one.
  - An index of `0` is falsy, so test the result with `is None`.
- `find(array, *values)` returns the index of an element equal to any of
  `values`, or `None`.
- `copy_to(array, size=None)` returns the elements in order as a list. If
  `size` is given, it returns at most `size` elements.

`erase` and `find` raise `TypeError` when no values are given.

## Demo

To run a short demonstration that pushes, sorts, splits and erases elements,
printing the results as it goes:

```
ringarray-demo
```

To fill an array of capacity 100 with `0` to `99`, copy it into a second array
through a list, check that the two arrays are equal, and print the copy in
reverse:

```
ringarray-demo copy --seed 1
```

The `--seed` option fixes the random starting positions. The same function is
`ringarray.demo.main(argv=None)`.

## Tests

```
pip install .[test]
pytest
```