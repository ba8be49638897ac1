import pytest

from ringarray.array import CircularArray


def test_basic_access_and_modification():
    dq = CircularArray(20, [1, 2, 3])
    assert len(dq) == 3
    assert list(dq) == [1, 2, 3]
    dq[1] = 42
    assert dq[1] == 42
    dq.pop_back()
    assert list(dq) == [1, 42]
    dq.clear()
    assert not dq
    assert len(dq) == 0


def test_insert_and_erase_simple():
    dq = CircularArray(20)
    dq.push_back(4)
    dq.insert(1, 5)
    assert list(dq) == [4, 5]
    dq.erase(0)
    assert list(dq) == [5]
    dq.resize(5)
    assert len(dq) == 5


def test_front_back_push_pop():
    dq = CircularArray(10, [1, 2, 3, 4, 5])
    dq[0] = 10
    dq.push_front(0)
    dq.push_back(6)
    assert dq.front == 0
    assert dq.back == 6
    dq.pop_front()
    dq.pop_back()
    assert dq.front == 10
    assert dq.back == 5
    pos = dq.insert(2, 99)
    assert pos == 2
    assert dq[2] == 99
    pos = dq.erase(3)
    assert dq[pos] == 4


def test_mixed_pushes_and_erases():
    dq = CircularArray(20)
    for i in range(1, 6):
        dq.push_back(i)
    for i in range(10, 16):
        dq.push_front(i)
    assert list(dq) == [15, 14, 13, 12, 11, 10, 1, 2, 3, 4, 5]
    dq.erase(2)
    dq.erase(len(dq) - 3)
    assert list(dq) == [15, 14, 12, 11, 10, 1, 2, 4, 5]
    dq.insert(3, 100)
    dq.insert(len(dq) - 1, 200)
    assert list(dq) == [15, 14, 12, 100, 11, 10, 1, 2, 4, 200, 5]


def test_overwrites_oldest_when_full():
    stack = CircularArray(5, [1, 2, 3, 4, 5])
    assert stack.full
    stack.push_back(6)
    assert len(stack) == 5
    assert stack.front == 2
    stack.pop_front(2)
    assert stack.front == 4


def test_push_front_on_full_overwrites_front():
    ca = CircularArray(3)
    ca.push_front(1)
    ca.push_back(2, 3)
    ca.push_front(4)
    assert list(ca) == [4, 2, 3]
    ca.sort()
    assert list(ca) == [2, 3, 4]


def test_constructor_keeps_last_values():
    ca = CircularArray(3, range(10))
    assert list(ca) == [7, 8, 9]


def test_copy_and_equality():
    dq2 = CircularArray(20, [1, 2, 3, 4, 5])
    dq3 = dq2.copy()
    assert dq3 == dq2
    dq3.push_back(6)
    assert list(dq2) == [1, 2, 3, 4, 5]


def test_comparisons():
    dq1 = CircularArray(20, [1, 2, 3, 4, 5])
    dq2 = CircularArray(20, [1, 2, 3, 4, 5])
    dq3 = CircularArray(20, [1, 2, 3, 4, 6])
    assert dq1 == dq2
    assert dq1 != dq3
    assert dq1 < dq3
    assert dq1 <= dq2
    assert dq3 > dq1
    assert dq2 >= dq1
    shorter = CircularArray(10, [1, 2, 3])
    longer = CircularArray(10, [1, 2, 3, 4])
    assert shorter < longer


def test_iteration_and_reversed():
    dq = CircularArray(20, [1, 2, 3, 4, 5])
    assert next(iter(dq)) == 1
    assert list(reversed(dq)) == [5, 4, 3, 2, 1]
    assert dq[-1] == 5
    assert dq[1:3] == [2, 3]


def test_erase_ranges():
    dq = CircularArray(20, [1, 2, 3, 4, 5])
    dq.insert(2, 6)
    assert list(dq) == [1, 2, 6, 3, 4, 5]
    dq.insert(3, 7)
    assert list(dq) == [1, 2, 6, 7, 3, 4, 5]
    dq.erase(2, 4)
    assert list(dq) == [1, 2, 3, 4, 5]
    dq.erase(3, len(dq))
    assert list(dq) == [1, 2, 3]
    dq.erase(0, len(dq))
    assert not dq
    assert dq.erase(0, 0) == 0


def test_erase_odd_loop():
    dq = CircularArray(10, range(10))
    dq.erase(0)
    dq.erase(2, 5)
    assert list(dq) == [1, 2, 6, 7, 8, 9]
    index = 0
    while index < len(dq):
        if dq[index] % 2 == 0:
            index = dq.erase(index)
        else:
            index += 1
    assert list(dq) == [1, 7, 9]


def test_insert_multiple_values():
    deque = CircularArray(10, [1, 2, 3, 4, 5])
    deque.insert(2, 6, 7, 8)
    assert list(deque) == [1, 2, 6, 7, 8, 3, 4, 5]
    deque = CircularArray(10, [1, 2, 3, 4, 5])
    first = deque.insert(0, 6, 7, 8)
    deque.insert(len(deque), 9, 10)
    assert first == 0
    assert list(deque) == [6, 7, 8, 1, 2, 3, 4, 5, 9, 10]


def test_insert_into_full_drops_front():
    ca = CircularArray(3, [1, 2, 3])
    pos = ca.insert(1, 9)
    assert list(ca) == [9, 2, 3]
    assert ca[pos] == 9


def test_ranges():
    arr = CircularArray(30, [1, 2, 3])
    vec = [4, 5, 6]
    arr.append_range(vec)
    assert list(arr) == [1, 2, 3, 4, 5, 6]
    arr.prepend_range(vec)
    assert list(arr) == [4, 5, 6, 1, 2, 3, 4, 5, 6]
    arr.insert_range(3, vec)
    assert list(arr) == [4, 5, 6, 4, 5, 6, 1, 2, 3, 4, 5, 6]


def test_resize_with_fill():
    dq = CircularArray(20, [1, 2, 3, 4, 5])
    dq.resize(3)
    assert list(dq) == [1, 2, 3]
    dq.resize(5, 100)
    assert list(dq) == [1, 2, 3, 100, 100]


def test_filled():
    a = CircularArray.filled(10, 5, 10)
    assert len(a) == 5
    assert all(e == 10 for e in a)


def test_swap():
    d1 = CircularArray(10, [1, 2, 3])
    d2 = CircularArray(10, [4, 5, 6, 7])
    d1.swap(d2)
    assert list(d1) == [4, 5, 6, 7]
    assert list(d2) == [1, 2, 3]


def test_append_round_trip():
    s = CircularArray(100)
    s.resize(s.capacity)
    s.assign(range(100))
    d = CircularArray(100, [0] * 37)
    d.clear()
    assert d.append(list(s)) == 100
    assert s == d


def test_append_is_limited_to_free_room():
    d = CircularArray(5, [1, 2])
    assert d.append([3, 4, 5, 6, 7]) == 3
    assert list(d) == [1, 2, 3, 4, 5]


def test_split_covers_contents_after_wrap():
    ca = CircularArray(5, range(5))
    ca.pop_front(3)
    ca.push_back(10, 11)
    segments = ca.split()
    assert [v for seg in segments for v in seg] == list(ca)
    assert len(segments) == 2
    assert CircularArray(5).split() == ()


def test_reverse_and_sort_descending():
    mdq = CircularArray(10, range(1, 11))
    mdq.reverse()
    assert list(mdq) == [10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
    mdq.sort()
    assert list(mdq) == list(range(1, 11))
    mdq.sort(reverse=True)
    assert mdq.front == 10


def test_reset_and_repr():
    ca = CircularArray(4, [1, 2])
    ca.reset()
    assert not ca
    ca.push_back(7)
    assert repr(ca) == "CircularArray(4, [7])"


def test_errors():
    with pytest.raises(ValueError):
        CircularArray(0)
    ca = CircularArray(3)
    with pytest.raises(IndexError):
        ca.front
    with pytest.raises(IndexError):
        ca[0]
    with pytest.raises(IndexError):
        ca.pop_back()
    with pytest.raises(ValueError):
        ca.resize(4)
    with pytest.raises(IndexError):
        ca.erase(0)
    with pytest.raises(IndexError):
        ca.insert(1, 5)
    with pytest.raises(TypeError):
        hash(ca)