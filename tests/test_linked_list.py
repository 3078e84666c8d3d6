from dsalgo.linked_list import LinkedList


def build_source_list():
    linked = LinkedList()
    linked.insert_at_tail(1)
    linked.insert_at_tail(2)
    linked.insert_at_tail(3)
    linked.insert_at_head(0)
    return linked


def test_insertions_order():
    linked = build_source_list()
    assert list(linked) == [0, 1, 2, 3]
    assert len(linked) == 4


def test_str_format():
    assert str(build_source_list()) == "0 -> 1 -> 2 -> 3 -> NULL"


def test_empty_list_str():
    assert str(LinkedList()) == "NULL"
    assert len(LinkedList()) == 0


def test_delete_middle():
    linked = build_source_list()
    assert linked.delete(2) is True
    assert list(linked) == [0, 1, 3]
    assert len(linked) == 3


def test_delete_head():
    linked = build_source_list()
    assert linked.delete(0) is True
    assert list(linked) == [1, 2, 3]


def test_delete_tail():
    linked = build_source_list()
    assert linked.delete(3) is True
    assert list(linked) == [0, 1, 2]
    linked.insert_at_tail(9)
    assert list(linked) == [0, 1, 2, 9]


def test_delete_missing_leaves_list_unchanged():
    linked = build_source_list()
    assert linked.delete(42) is False
    assert list(linked) == [0, 1, 2, 3]
    assert len(linked) == 4


def test_delete_from_empty():
    linked = LinkedList()
    assert linked.delete(1) is False
    assert len(linked) == 0


def test_delete_removes_only_first_occurrence():
    linked = LinkedList([5, 6, 5])
    linked.delete(5)
    assert list(linked) == [6, 5]


def test_constructor_from_iterable():
    linked = LinkedList(range(4))
    assert list(linked) == list(range(4))


def test_head_insert_into_empty():
    linked = LinkedList()
    linked.insert_at_head(7)
    linked.insert_at_tail(8)
    assert list(linked) == [7, 8]