import pytest

from algokit.doubly_linked_list import DoublyLinkedList
from algokit.singly_linked_list import EmptyListError


def _check_links(dll):
    forward = list(dll)
    assert list(reversed(dll)) == forward[::-1]
    assert len(forward) == len(dll)
    return forward


def test_build_from_values_keeps_order():
    values = [4, 8, 15, 16, 23, 42]
    dll = DoublyLinkedList(values)
    assert _check_links(dll) == values


def test_empty_list():
    dll = DoublyLinkedList()
    assert len(dll) == 0
    assert list(dll) == []
    assert list(reversed(dll)) == []


def test_push_front_prepends():
    dll = DoublyLinkedList()
    for value in (1, 2, 3):
        dll.push_front(value)
    assert _check_links(dll) == [3, 2, 1]


def test_push_back_appends():
    dll = DoublyLinkedList()
    for value in "abc":
        dll.push_back(value)
    assert _check_links(dll) == ["a", "b", "c"]


@pytest.mark.parametrize("position", [1, 2, 3, 4, 5, 6, 20])
def test_insert_matches_list_model(position):
    values = [10, 20, 30, 40, 50]
    dll = DoublyLinkedList(values)
    dll.insert(99, position)
    model = list(values)
    model.insert(position - 1, 99)
    assert _check_links(dll) == model


def test_insert_into_empty_list_ignores_position():
    dll = DoublyLinkedList()
    dll.insert(7, 5)
    assert _check_links(dll) == [7]


def test_insert_rejects_position_below_one():
    dll = DoublyLinkedList([1, 2])
    with pytest.raises(ValueError):
        dll.insert(3, 0)


def test_pop_front_and_back_return_values():
    dll = DoublyLinkedList([1, 2, 3, 4])
    assert dll.pop_front() == 1
    assert dll.pop_back() == 4
    assert _check_links(dll) == [2, 3]


def test_pop_single_element_leaves_empty_list():
    dll = DoublyLinkedList(["x"])
    assert dll.pop_back() == "x"
    assert len(dll) == 0
    dll.push_back("y")
    assert _check_links(dll) == ["y"]


def test_pop_front_on_empty_raises():
    dll = DoublyLinkedList()
    with pytest.raises(EmptyListError, match="Doubly linked list empty!!"):
        dll.pop_front()
    assert len(dll) == 0
    assert list(dll) == []


def test_pop_back_on_empty_raises():
    dll = DoublyLinkedList()
    with pytest.raises(EmptyListError, match="Doubly linked list empty!!"):
        dll.pop_back()
    assert len(dll) == 0
    assert list(dll) == []


def test_get_every_position():
    values = ["a", "b", "c", "d", "e"]
    dll = DoublyLinkedList(values)
    assert [dll.get(p) for p in range(1, len(values) + 1)] == values


def test_get_on_empty_raises_empty_error():
    with pytest.raises(EmptyListError):
        DoublyLinkedList().get(1)


@pytest.mark.parametrize("position", [0, 4, 10])
def test_get_out_of_range_raises(position):
    dll = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        dll.get(position)


@pytest.mark.parametrize("position", [1, 2, 3, 4, 5])
def test_remove_matches_list_model(position):
    values = [10, 20, 30, 40, 50]
    dll = DoublyLinkedList(values)
    removed = dll.remove(position)
    model = list(values)
    assert removed == model.pop(position - 1)
    assert _check_links(dll) == model


def test_remove_out_of_range_raises():
    dll = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        dll.remove(3)
    assert list(dll) == [1, 2]


def test_remove_on_empty_raises():
    with pytest.raises(EmptyListError):
        DoublyLinkedList().remove(1)


def test_clear_empties_and_allows_reuse():
    dll = DoublyLinkedList([1, 2, 3])
    dll.clear()
    assert len(dll) == 0
    assert list(dll) == []
    dll.push_front(5)
    assert _check_links(dll) == [5]


def test_mixed_operations_agree_with_model():
    dll = DoublyLinkedList()
    model = []
    for i in range(10):
        if i % 3 == 0:
            dll.push_front(i)
            model.insert(0, i)
        elif i % 3 == 1:
            dll.push_back(i)
            model.append(i)
        else:
            dll.insert(i, 2)
            model.insert(1, i)
    assert dll.pop_back() == model.pop()
    assert dll.remove(3) == model.pop(2)
    assert _check_links(dll) == model