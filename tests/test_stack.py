import pytest

from dsakit.stack import (
    BoundedStack,
    StackOverflowError,
    StackUnderflowError,
    reverse_string,
)


def test_push_and_peek():
    st = BoundedStack(5)
    st.push(2)
    st.push(12)
    st.push(22)
    assert st.peek() == 22
    assert len(st) == 3


def test_pop_returns_last_in():
    st = BoundedStack(5)
    for value in (21, 9, 25):
        st.push(value)
    assert [st.pop(), st.pop(), st.pop()] == [25, 9, 21]
    assert st.is_empty()


def test_peek_after_draining_raises():
    st = BoundedStack(5)
    st.push(21)
    st.pop()
    with pytest.raises(StackUnderflowError):
        st.peek()


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack(3).pop()


def test_underflow_is_index_error():
    with pytest.raises(IndexError):
        BoundedStack(1).pop()


def test_overflow_at_capacity():
    st = BoundedStack(3)
    for value in range(3):
        st.push(value)
    with pytest.raises(StackOverflowError):
        st.push(99)
    assert len(st) == 3
    assert st.peek() == 2


def test_zero_capacity_rejects_push():
    st = BoundedStack(0)
    with pytest.raises(StackOverflowError):
        st.push(1)


def test_negative_capacity():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_is_empty_transitions():
    st = BoundedStack(2)
    assert st.is_empty() is True
    st.push("x")
    assert st.is_empty() is False


def test_peek_does_not_remove():
    st = BoundedStack(2)
    st.push(3)
    st.peek()
    assert len(st) == 1


def test_reverse_string_source_example():
    assert reverse_string("niraj") == "jarin"


@pytest.mark.parametrize("text", ["", "a", "hello world", "abba"])
def test_reverse_string_round_trip(text):
    assert reverse_string(reverse_string(text)) == text


def test_reverse_string_ends_swap():
    text = "stack"
    result = reverse_string(text)
    assert result[0] == text[-1]
    assert result[-1] == text[0]
    assert len(result) == len(text)