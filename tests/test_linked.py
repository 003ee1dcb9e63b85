import pytest

from leetkit.linked import (
    ListNode,
    get_intersection_node,
    list_from_values,
    list_length,
    reorder_list,
)


def test_list_round_trip():
    head = list_from_values(1, 2, 3, 4, 5)
    assert head.to_list() == [1, 2, 3, 4, 5]


def test_list_from_no_values_is_none():
    assert list_from_values() is None
    assert list_length(None) == 0


def test_list_length():
    assert list_length(list_from_values(4, 5, 6)) == 3


def test_reorder_odd_length():
    head = list_from_values(1, 2, 3, 4, 5)
    reorder_list(head)
    assert head.to_list() == [1, 5, 2, 4, 3]


def test_reorder_even_length():
    head = list_from_values(1, 2, 3, 4)
    reorder_list(head)
    assert head.to_list() == [1, 4, 2, 3]


@pytest.mark.parametrize("values", [(1,), (1, 2), (7, 8, 9, 10, 11, 12, 13)])
def test_reorder_keeps_head_and_values(values):
    head = list_from_values(*values)
    reorder_list(head)
    result = head.to_list()
    assert result[0] == values[0]
    assert sorted(result) == sorted(values)
    assert len(result) == len(values)


def test_reorder_none_is_noop():
    assert reorder_list(None) is None


def _join(prefix_values, shared):
    head = list_from_values(*prefix_values)
    if head is None:
        return shared
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = shared
    return head


def test_intersection_found_with_longer_a():
    shared = list_from_values(8, 4, 5)
    a = _join((4, 1), shared)
    b = _join((5,), shared)
    assert get_intersection_node(a, b) is shared


def test_intersection_found_with_longer_b():
    shared = list_from_values(2, 4)
    a = _join((3,), shared)
    b = _join((1, 9, 1), shared)
    assert get_intersection_node(a, b) is shared


def test_no_intersection_returns_none():
    a = list_from_values(2, 6, 4)
    b = list_from_values(1, 5)
    assert get_intersection_node(a, b) is None


def test_identical_heads_intersect_at_head():
    head = ListNode(1, ListNode(2))
    assert get_intersection_node(head, head) is head