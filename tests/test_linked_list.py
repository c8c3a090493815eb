import pytest

from exgrade.linked_list import DoublyLinkedList, SinglyLinkedList, merge_sorted


@pytest.mark.parametrize("cls", [SinglyLinkedList, DoublyLinkedList])
def test_create_numeric_list(cls):
    lst = cls()
    lst.add(1)
    lst.add(2)
    lst.add(3)
    assert len(lst) == 3
    assert str(lst) == "1, 2, 3"


@pytest.mark.parametrize("cls", [SinglyLinkedList, DoublyLinkedList])
def test_create_string_list(cls):
    lst = cls()
    for value in ["A", "B", "C"]:
        lst.add(value)
    assert len(lst) == 3
    assert list(lst) == ["A", "B", "C"]


@pytest.mark.parametrize("cls", [SinglyLinkedList, DoublyLinkedList])
def test_get_out_of_range(cls):
    lst = cls([5, 6])
    assert lst.get(0) == 5
    assert lst.get(1) == 6
    assert lst.get(2) is None
    assert lst.get(-1) is None


@pytest.mark.parametrize("cls", [SinglyLinkedList, DoublyLinkedList])
def test_empty_list_display(cls):
    lst = cls()
    assert str(lst) == ""
    assert len(lst) == 0
    assert lst.get(0) is None


@pytest.mark.parametrize(
    "vec_a, vec_b, target",
    [
        ([1, 3, 5, 7], [2, 4, 6, 8], [1, 2, 3, 4, 5, 6, 7, 8]),
        (
            [11, 33, 44, 88, 89, 90, 100],
            [1, 22, 30, 45],
            [1, 11, 22, 30, 33, 44, 45, 88, 89, 90, 100],
        ),
    ],
)
def test_merge_linked_list(vec_a, vec_b, target):
    list_a = SinglyLinkedList()
    list_b = SinglyLinkedList()
    for value in vec_a:
        list_a.add(value)
    for value in vec_b:
        list_b.add(value)
    merged = merge_sorted(list_a, list_b)
    for index, expected in enumerate(target):
        assert merged.get(index) == expected
    assert len(merged) == len(target)


def test_merge_with_empty():
    merged = merge_sorted(SinglyLinkedList(), SinglyLinkedList([1, 2]))
    assert list(merged) == [1, 2]
    assert len(merge_sorted(SinglyLinkedList(), SinglyLinkedList())) == 0


@pytest.mark.parametrize(
    "original, reversed_values",
    [
        ([2, 3, 5, 11, 9, 7], [7, 9, 11, 5, 3, 2]),
        (
            [34, 56, 78, 25, 90, 10, 19, 34, 21, 45],
            [45, 21, 34, 19, 10, 90, 25, 78, 56, 34],
        ),
    ],
)
def test_reverse_linked_list(original, reversed_values):
    lst = DoublyLinkedList()
    for value in original:
        lst.add(value)
    lst.reverse()
    for index, expected in enumerate(reversed_values):
        assert lst.get(index) == expected


def test_reverse_keeps_back_links_consistent():
    lst = DoublyLinkedList([1, 2, 3, 4])
    lst.reverse()
    assert list(reversed(lst)) == list(lst)[::-1]
    lst.add(0)
    assert list(lst) == [4, 3, 2, 1, 0]
    assert len(lst) == 5


def test_reverse_twice_restores_order():
    lst = DoublyLinkedList([1, 2, 3])
    lst.reverse()
    lst.reverse()
    assert list(lst) == [1, 2, 3]


def test_reverse_empty_and_single():
    empty = DoublyLinkedList()
    empty.reverse()
    assert list(empty) == []
    single = DoublyLinkedList([9])
    single.reverse()
    assert list(single) == [9]