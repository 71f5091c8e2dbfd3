import pytest

from gamekit.composite import Composite


def _tree():
    root = Composite(1)
    two = root.add_child(2)
    root.add_child(3)
    two.add_child(4)
    return root


def test_add_child_links_parent():
    root = Composite("root")
    child = root.add_child("child")
    assert child.parent is root
    assert root[0] is child
    assert len(root) == 1
    assert child.value == "child"


def test_indexing_out_of_range_raises():
    root = Composite(0)
    assert len(root) == 0
    assert list(root) == []
    with pytest.raises(IndexError):
        root[0]


def test_iteration_yields_children_in_order():
    root = _tree()
    assert [c.value for c in root] == [2, 3]


def test_for_each_visit_order():
    visited = []

    def action(parent, value):
        visited.append(value)
        return value

    tree = _tree()
    tree.for_each(action)
    assert visited == [1, 3, 2, 4]
    assert visited == [tree.value, tree[1].value, tree[0].value, tree[0][0].value]


def test_for_each_passes_parent_result_down():
    seen_parent = {}
    returned = {}

    def action(parent, value):
        seen_parent[value] = parent
        returned[value] = parent + value
        return returned[value]

    tree = _tree()
    tree.for_each(action)
    assert seen_parent[1] == 0
    assert seen_parent[2] == returned[1]
    assert seen_parent[3] == returned[1]
    assert seen_parent[4] == returned[2]
    assert seen_parent[tree[0][0].value] == returned[tree[0].value]
    assert sorted(returned) == [1, 2, 3, 4]


def test_for_each_root_default_matches_value_type():
    received = []
    Composite("x").for_each(lambda parent, value: received.append(parent) or value)
    assert received == [""]


def test_absolute_loop_folds_root_first():
    root = Composite("a")
    mid = root.add_child("b")
    leaf = mid.add_child("c")
    result = leaf.absolute_loop(lambda acc, anc: acc + anc)
    assert result.value == "cab"
    assert result.parent is mid
    assert result not in mid.children
    assert leaf.value == "c"


def test_absolute_loop_on_root_copies_value():
    root = Composite(5)
    result = root.absolute_loop(lambda acc, anc: acc + anc)
    assert result.value == 5
    assert result.parent is None
    assert result is not root