import pytest

from solong.linkedlist import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.head is None


def test_push_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.push_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b", "c"]


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back("x")
    lst.push_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() == "y"


def test_len_matches_items():
    items = list(range(7))
    assert len(LinkedList(items)) == len(items)


def test_nodes_are_linked():
    lst = LinkedList(["a", "b"])
    assert isinstance(lst.head, Node)
    assert lst.head.content == "a"
    assert lst.head.next.content == "b"
    assert lst.head.next.next is None


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_pop_front_calls_delete():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0


def test_clear_without_delete():
    lst = LinkedList(["a"])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_all():
    seen = []
    items = ["p", "q"]
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list():
    source = LinkedList(["ab", "cd"])
    mapped = source.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(source) == ["ab", "cd"]


def test_map_failure_deletes_partial_result():
    deleted = []

    def func(value):
        if value == "bad":
            raise ValueError(value)
        return value * 2

    source = LinkedList(["a", "b", "bad", "c"])
    with pytest.raises(ValueError):
        source.map(func, deleted.append)
    assert deleted == ["aa", "bb"]