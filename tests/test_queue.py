import copy

import pytest

from uppkit.queue import Queue


def test_ctor_default():
    q = Queue()
    assert not q
    assert len(q) == 0


def test_ctor_initializer_list():
    q = Queue([1, 2, 3, 4])
    assert q
    assert len(q) == 4


def test_iterate_empty():
    assert list(Queue()) == []


def test_iterate_items():
    it = iter(Queue([1, 2, 3]))
    assert next(it) == 1
    assert next(it) == 2
    assert next(it) == 3
    with pytest.raises(StopIteration):
        next(it)


def test_iterate_for_loop():
    out = []
    for v in Queue([1, 2, 3]):
        out.append(v)
    assert out == [1, 2, 3]


def test_iterate_reversed():
    assert list(reversed(Queue([1, 2, 3]))) == [3, 2, 1]


def test_add_emplace_back():
    q = Queue()
    for i in range(100):
        assert len(q) == i
        q.append(bytes(100))
    assert len(q) == 100


def test_add_emplace_front():
    q = Queue()
    for i in range(100):
        assert len(q) == i
        q.appendleft(bytes(100))
    assert len(q) == 100


def test_appendleft_order():
    q = Queue()
    for i in range(5):
        q.appendleft(i)
    assert list(q) == [4, 3, 2, 1, 0]


def test_pop_back_all():
    q = Queue()
    for i in range(100):
        q.append(i)
    for i in range(100, 0, -1):
        assert len(q) == i
        assert q.pop() == i - 1
    assert len(q) == 0


def test_pop_front_all():
    q = Queue()
    for i in range(100):
        q.appendleft(i)
    for i in range(100, 0, -1):
        assert len(q) == i
        assert q.popleft() == i - 1
    assert not q


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Queue().pop()
    with pytest.raises(IndexError):
        Queue().popleft()


def test_write_read_front_to_back():
    window = 10
    q = Queue()
    for _ in range(window):
        q.appendleft(0)
    for _ in range(1000):
        q.appendleft(0)
        q.pop()
        assert len(q) == window


def test_write_read_back_to_front():
    window = 10
    q = Queue()
    for _ in range(window):
        q.append(0)
    for _ in range(1000):
        q.append(0)
        q.popleft()
        assert len(q) == window


def test_fifo_order_through_window():
    q = Queue(range(3))
    seen = []
    for i in range(3, 10):
        q.append(i)
        seen.append(q.popleft())
    assert seen == [0, 1, 2, 3, 4, 5, 6]
    assert list(q) == [7, 8, 9]


def test_copy_is_independent():
    q = Queue([1, 2, 3])
    c = copy.copy(q)
    c.append(4)
    assert list(q) == [1, 2, 3]
    assert list(c) == [1, 2, 3, 4]