from core.seed import default_tree
from core.tree_utils import (
    build,
    descendants,
    find_index,
    find_item,
    flatten,
    max_descendant_depth,
    normalize,
)
from core.types import FlatItem
from tests.helpers import N, assert_consistent, ids, shape


def _flat(item_id, parent_id, depth):
    return FlatItem(id=item_id, label=item_id, color="red", is_checked=False, parent_id=parent_id, depth=depth)


def test_flatten_simple_tree():
    items = flatten([N("A", N("B"), N("C"))])
    assert shape(items) == [("A", None, 0), ("B", "A", 1), ("C", "A", 1)]


def test_flatten_keeps_attributes_and_preorder():
    tree = [N("A", N("B", N("D")), N("C"), color="blue", checked=True), N("E")]
    items = flatten(tree)
    assert ids(items) == ["A", "B", "D", "C", "E"]
    assert items[0].color == "blue"
    assert items[0].is_checked is True
    assert items[0].label == "Item A"
    assert shape(items)[2] == ("D", "B", 2)


def test_flatten_with_explicit_parent_and_depth():
    items = flatten([N("X")], parent_id="P", depth=3)
    assert shape(items) == [("X", "P", 3)]


def test_flatten_empty():
    assert flatten([]) == []


def test_build_round_trip():
    tree = default_tree()
    assert build(flatten(tree)) == tree
    assert flatten(build(flatten(tree))) == flatten(tree)


def test_build_drops_orphans_with_their_subtree():
    items = [
        _flat("A", None, 0),
        _flat("B", "missing", 1),
        _flat("C", "B", 2),
        _flat("D", "A", 1),
    ]
    tree = build(items)
    assert [n.id for n in tree] == ["A"]
    assert [n.id for n in tree[0].children] == ["D"]
    assert ids(normalize(items)) == ["A", "D"]


def test_build_attaches_children_in_flat_order():
    items = [
        _flat("C", "A", 1),
        _flat("A", None, 0),
        _flat("B", "A", 1),
    ]
    tree = build(items)
    assert [n.id for n in tree[0].children] == ["C", "B"]


def test_normalize_recomputes_depth_and_groups_children():
    items = [
        _flat("A", None, 0),
        _flat("X", "A", 5),
        _flat("B", None, 0),
        _flat("Y", "A", 0),
    ]
    out = normalize(items)
    assert shape(out) == [("A", None, 0), ("X", "A", 1), ("Y", "A", 1), ("B", None, 0)]
    assert_consistent(out)


def test_normalize_is_idempotent():
    items = [
        _flat("A", None, 3),
        _flat("B", "C", 0),
        _flat("C", "A", 9),
        _flat("D", "nowhere", 1),
    ]
    once = normalize(items)
    assert normalize(once) == once
    assert_consistent(once)


def test_descendants_preorder():
    items = flatten([N("A", N("B", N("D")), N("C")), N("E")])
    assert descendants(items, "A") == ["B", "D", "C"]
    assert descendants(items, "B") == ["D"]
    assert descendants(items, "E") == []
    assert descendants(items, "nope") == []


def test_descendants_follow_parent_links_not_positions():
    items = [
        _flat("C", "A", 1),
        _flat("B", None, 0),
        _flat("A", None, 0),
    ]
    assert descendants(items, "A") == ["C"]
    assert descendants(items, "B") == []


def test_descendants_terminate_on_cycles():
    items = [
        _flat("X", "Y", 0),
        _flat("Y", "X", 0),
    ]
    assert descendants(items, "X") == ["Y"]


def test_max_descendant_depth():
    items = flatten([N("A", N("B", N("D")), N("C")), N("E")])
    assert max_descendant_depth(items, "A") == 2
    assert max_descendant_depth(items, "E") == 0
    assert max_descendant_depth(items, "C") == 1


def test_lookup_helpers():
    items = flatten([N("A", N("B"))])
    assert find_item(items, "B").parent_id == "A"
    assert find_item(items, "Z") is None
    assert find_index(items, "B") == 1
    assert find_index(items, "Z") == -1
