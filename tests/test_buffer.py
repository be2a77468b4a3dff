import pytest

from zcore.buffer import FixedBuffer


def test_append_and_read_back():
    buf = FixedBuffer(4)
    for value in ("a", "b", "c"):
        buf.append(value)
    assert len(buf) == 3
    assert list(buf) == ["a", "b", "c"]
    assert buf[0] == "a"
    assert buf[-1] == "c"


def test_append_beyond_capacity_raises():
    buf = FixedBuffer(2)
    buf.append(1)
    buf.append(2)
    with pytest.raises(OverflowError):
        buf.append(3)
    assert list(buf) == [1, 2]


def test_extend_within_capacity():
    buf = FixedBuffer(5)
    buf.append(0)
    buf.extend([1, 2, 3])
    assert list(buf) == [0, 1, 2, 3]


def test_extend_overflow_leaves_buffer_unchanged():
    buf = FixedBuffer(3)
    buf.append("x")
    with pytest.raises(OverflowError):
        buf.extend(["y", "z", "w"])
    assert list(buf) == ["x"]


def test_pop_returns_last():
    buf = FixedBuffer(3)
    buf.extend([10, 20])
    assert buf.pop() == 20
    assert list(buf) == [10]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        FixedBuffer(1).pop()


def test_clear_keeps_capacity():
    buf = FixedBuffer(3)
    buf.extend([1, 2, 3])
    buf.clear()
    assert len(buf) == 0
    assert buf.capacity == 3
    buf.extend([4, 5, 6])
    assert list(buf) == [4, 5, 6]


def test_copy_is_independent():
    buf = FixedBuffer(4)
    buf.extend([1, 2])
    duplicate = buf.copy()
    duplicate.append(3)
    assert list(buf) == [1, 2]
    assert list(duplicate) == [1, 2, 3]
    assert duplicate.capacity == buf.capacity


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        FixedBuffer(-1)