import pytest

from algokit.circular_linked_list import CircularLinkedList
from algokit.singly_linked_list import EmptyListError


def test_build_from_values_keeps_order():
    values = [3, 1, 4, 1, 5, 9]
    cll = CircularLinkedList(values)
    assert list(cll) == values
    assert len(cll) == len(values)


def test_empty_list_iterates_to_nothing():
    cll = CircularLinkedList()
    assert list(cll) == []
    assert len(cll) == 0


def test_iteration_visits_each_element_once():
    cll = CircularLinkedList(range(7))
    assert len(list(cll)) == len(cll)
    assert list(cll) == list(range(7))


def test_push_front_prepends_every_time():
    cll = CircularLinkedList()
    for value in (1, 2, 3):
        cll.push_front(value)
    assert list(cll) == [3, 2, 1]


def test_push_back_appends():
    cll = CircularLinkedList()
    for value in "xyz":
        cll.push_back(value)
    assert list(cll) == ["x", "y", "z"]


@pytest.mark.parametrize("position", [1, 2, 3, 4, 5, 9])
def test_insert_matches_list_model(position):
    values = [10, 20, 30, 40]
    cll = CircularLinkedList(values)
    cll.insert(77, position)
    model = list(values)
    model.insert(position - 1, 77)
    assert list(cll) == model
    assert len(cll) == len(model)


def test_insert_into_empty_list():
    cll = CircularLinkedList()
    cll.insert("only", 3)
    assert list(cll) == ["only"]


def test_insert_rejects_position_below_one():
    with pytest.raises(ValueError):
        CircularLinkedList([1]).insert(2, 0)


def test_pop_front_returns_head():
    cll = CircularLinkedList([1, 2, 3])
    assert cll.pop_front() == 1
    assert list(cll) == [2, 3]
    assert len(cll) == 2


def test_pop_back_returns_tail():
    cll = CircularLinkedList([1, 2, 3])
    assert cll.pop_back() == 3
    assert list(cll) == [1, 2]
    cll.push_back(4)
    assert list(cll) == [1, 2, 4]


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_single_element_empties_list(method):
    cll = CircularLinkedList(["solo"])
    assert getattr(cll, method)() == "solo"
    assert list(cll) == []
    assert len(cll) == 0


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_on_empty_raises(method):
    with pytest.raises(EmptyListError, match="Circular linked list empty"):
        getattr(CircularLinkedList(), method)()


def test_drain_alternating_ends():
    values = list(range(6))
    cll = CircularLinkedList(values)
    drained = []
    while len(cll):
        drained.append(cll.pop_front())
        if len(cll):
            drained.append(cll.pop_back())
    assert sorted(drained) == values
    assert drained[:2] == [values[0], values[-1]]


def test_mixed_operations_agree_with_model():
    cll = CircularLinkedList()
    model = []
    for i in range(12):
        if i % 4 == 0:
            cll.push_front(i)
            model.insert(0, i)
        elif i % 4 == 1:
            cll.push_back(i)
            model.append(i)
        elif i % 4 == 2:
            cll.insert(i, 2)
            model.insert(1, i)
        else:
            assert cll.pop_back() == model.pop()
    assert list(cll) == model
    assert len(cll) == len(model)