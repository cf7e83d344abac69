import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.doubly_linked_list import DoublyLinkedList

any_ints = st.lists(st.integers(), max_size=20)
some_ints = st.lists(st.integers(), min_size=1, max_size=20)
three_or_more = st.lists(st.integers(), min_size=3, max_size=20)


def _check(dll, expected):
    """Assert the list holds *expected*, read both ways, with matching ends."""
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]
    assert len(dll) == len(expected)
    assert dll.is_empty() is (len(expected) == 0)
    if expected:
        assert [dll.first(), dll.last()] == [expected[0], expected[-1]]


@given(any_ints)
def test_round_trip_both_directions(values):
    _check(DoublyLinkedList(values), values)


@pytest.mark.parametrize(
    "call",
    [
        pytest.param(lambda dll: dll.first(), id="first"),
        pytest.param(lambda dll: dll.last(), id="last"),
        pytest.param(lambda dll: dll.delete_first(), id="delete_first"),
        pytest.param(lambda dll: dll.delete_last(), id="delete_last"),
        pytest.param(lambda dll: dll.delete_at(0), id="delete_at"),
        pytest.param(lambda dll: dll.insert(2, 1), id="insert"),
    ],
)
def test_operations_on_empty_raise(call):
    dll = DoublyLinkedList()
    with pytest.raises(IndexError):
        call(dll)
    _check(dll, [])


@pytest.mark.parametrize(
    "call",
    [
        pytest.param(lambda dll, size: dll.insert(size + 1, 7), id="insert-beyond"),
        pytest.param(lambda dll, size: dll.insert(-1, 7), id="insert-below"),
        pytest.param(lambda dll, size: dll.delete_at(size + 1), id="delete-beyond"),
        pytest.param(lambda dll, size: dll.delete_at(-1), id="delete-below"),
    ],
)
@given(values=some_ints)
def test_bad_positions_raise_and_change_nothing(call, values):
    dll = DoublyLinkedList(values)
    with pytest.raises(IndexError):
        call(dll, len(values))
    _check(dll, values)


@given(any_ints, st.lists(st.tuples(st.booleans(), st.integers()), max_size=20))
def test_pushes_follow_model(values, pushes):
    dll = DoublyLinkedList(values)
    model = list(values)
    for at_front, value in pushes:
        (dll.push_first if at_front else dll.push_last)(value)
        model[0 if at_front else len(model):0 if at_front else len(model)] = [value]
    _check(dll, model)


@given(any_ints)
def test_insert_at_zero_and_length(values):
    dll = DoublyLinkedList(values)
    dll.insert(0, -1)
    dll.insert(len(dll), -2)
    _check(dll, [-1] + values + [-2])


@given(three_or_more, st.data())
def test_insert_in_middle_lands_before_one_based_position(values, data):
    position = data.draw(st.integers(2, len(values) - 1))
    dll = DoublyLinkedList(values)
    dll.insert(position, 99)
    _check(dll, values[: position - 1] + [99] + values[position - 1 :])


@given(st.lists(st.integers(), min_size=2, max_size=20))
def test_insert_at_one_goes_after_first(values):
    dll = DoublyLinkedList(values)
    dll.insert(1, 99)
    _check(dll, values[:1] + [99] + values[1:])


@given(some_ints)
def test_delete_at_length_then_zero(values):
    dll = DoublyLinkedList(values)
    assert dll.delete_at(len(dll)) == values[-1]
    _check(dll, values[:-1])
    if len(values) > 1:
        assert dll.delete_at(0) == values[0]
        _check(dll, values[1:-1])


@given(three_or_more, st.data())
def test_delete_in_middle_removes_one_based_position(values, data):
    position = data.draw(st.integers(2, len(values) - 1))
    dll = DoublyLinkedList(values)
    assert dll.delete_at(position) == values[position - 1]
    _check(dll, values[: position - 1] + values[position:])


@given(st.lists(st.integers(), min_size=2, max_size=20))
def test_delete_at_one_removes_second(values):
    dll = DoublyLinkedList(values)
    assert dll.delete_at(1) == values[1]
    _check(dll, values[:1] + values[2:])


@given(some_ints)
def test_tail_stays_linked_after_delete_last(values):
    dll = DoublyLinkedList(values)
    assert dll.delete_last() == values[-1]
    dll.push_last(1000)
    _check(dll, values[:-1] + [1000])


@given(some_ints)
def test_drain_from_front(values):
    dll = DoublyLinkedList(values)
    assert [dll.delete_first() for _ in values] == values
    _check(dll, [])
    dll.push_first(5)
    _check(dll, [5])


def test_worked_example():
    dll = DoublyLinkedList()
    _check(dll, [])
    for value in (5, 8, 2):
        dll.push_first(value)
    dll.push_last(1)
    dll.insert(1, 10)
    _check(dll, [2, 10, 8, 5, 1])
    for position in (3, 1, 3):
        dll.delete_at(position)
    _check(dll, [2, 5])