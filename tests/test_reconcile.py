import pytest

from core.reconcile import projected_depth, reconcile_drag
from core.seed import default_tree
from core.tree_utils import flatten, normalize
from tests.helpers import N, assert_consistent, by_id, chain, ids, shape

INDENT = 24


# ---------- Projection ----------

@pytest.mark.parametrize("depth, offset, expected", [
    (2, 0, 2),
    (2, 11, 2),
    (2, 12, 3),      # half rounds up
    (2, -12, 2),     # ... toward +inf
    (2, -13, 1),
    (2, 48, 4),
    (0, -100, 0),    # never below zero
])
def test_projected_depth(depth, offset, expected):
    item = flatten([N("A")], depth=depth)[0]
    assert projected_depth(item, offset, INDENT) == expected


# ---------- Aborts ----------

def test_no_drop_target_leaves_sequence_unchanged():
    items = flatten([N("A"), N("B")])
    assert reconcile_drag(items, "A", None, 48) == items


@pytest.mark.parametrize("active_id, over_id", [("Z", "A"), ("A", "Z")])
def test_unknown_ids_leave_sequence_unchanged(active_id, over_id):
    items = flatten([N("A"), N("B")])
    assert reconcile_drag(items, active_id, over_id, 0) == items


def test_dropping_onto_own_subtree_is_ignored():
    items = flatten([N("A", N("B", N("C"))), N("D")])
    assert reconcile_drag(items, "A", "C", 0) == items
    assert reconcile_drag(items, "A", "B", 48) == items


def test_input_list_is_not_modified():
    items = flatten([N("A"), N("B"), N("C")])
    snapshot = list(items)
    reconcile_drag(items, "C", "A", 24)
    assert items == snapshot


# ---------- Vertical reorder ----------

def test_reorder_up_among_top_level_siblings():
    items = flatten([N("A"), N("B"), N("C")])
    out = reconcile_drag(items, "C", "B", 0)
    assert shape(out) == [("A", None, 0), ("C", None, 0), ("B", None, 0)]


def test_reorder_down_among_top_level_siblings():
    items = flatten([N("A"), N("C"), N("B")])
    out = reconcile_drag(items, "C", "B", 0)
    assert shape(out) == [("A", None, 0), ("B", None, 0), ("C", None, 0)]


def test_reorder_adopts_parent_of_target_when_moving_up():
    items = flatten([N("A", N("B"), N("C")), N("D")])
    out = reconcile_drag(items, "D", "B", 0)
    assert shape(out) == [("A", None, 0), ("D", "A", 1), ("B", "A", 1), ("C", "A", 1)]


def test_reorder_moving_down_lands_after_target_subtree():
    items = flatten([N("A"), N("T", N("T1"), N("T2")), N("Z")])
    out = reconcile_drag(items, "A", "T", 0)
    assert ids(out) == ["T", "T1", "T2", "A", "Z"]
    assert by_id(out)["A"].parent_id is None
    assert_consistent(out)


def test_subtree_moves_as_block_and_shifts_depth():
    items = flatten([N("A", N("B", N("x"), N("y"))), N("Z")])
    out = reconcile_drag(items, "B", "Z", 0)
    assert shape(out) == [
        ("A", None, 0),
        ("Z", None, 0),
        ("B", None, 0),
        ("x", "B", 1),
        ("y", "B", 1),
    ]


def test_drop_on_itself_without_offset_is_a_no_op():
    items = flatten([N("A", N("B")), N("C")])
    assert reconcile_drag(items, "B", "B", 0) == items


# ---------- Indent ----------

def test_indent_in_place_under_previous_sibling():
    items = flatten([N("A"), N("B"), N("D")])
    out = reconcile_drag(items, "D", "D", INDENT)
    assert shape(out) == [("A", None, 0), ("B", None, 0), ("D", "B", 1)]


def test_indent_while_hovering_target_below():
    items = flatten([N("A"), N("D"), N("B")])
    out = reconcile_drag(items, "D", "B", INDENT)
    assert shape(out) == [("A", None, 0), ("B", None, 0), ("D", "B", 1)]


def test_indent_onto_target_with_children_becomes_first_child():
    items = flatten([N("D"), N("B", N("E"))])
    out = reconcile_drag(items, "D", "B", INDENT)
    assert shape(out) == [("B", None, 0), ("D", "B", 1), ("E", "B", 1)]


def test_deeper_indent_picks_last_descendant_of_target():
    items = flatten([N("D"), N("B", N("E"))])
    out = reconcile_drag(items, "D", "B", 2 * INDENT)
    assert shape(out) == [("B", None, 0), ("E", "B", 1), ("D", "E", 2)]


def test_indent_moving_up_only_considers_rows_above_target():
    items = flatten([N("A", N("B")), N("C"), N("D")])
    out = reconcile_drag(items, "D", "C", INDENT)
    assert shape(out) == [("A", None, 0), ("B", "A", 1), ("D", "A", 1), ("C", None, 0)]


def test_indent_never_skips_levels():
    items = flatten([N("A"), N("B")])
    out = reconcile_drag(items, "B", "B", 5 * INDENT)
    assert shape(out) == [("A", None, 0), ("B", "A", 1)]


def test_indent_of_first_row_has_no_parent_to_take():
    items = flatten([N("A"), N("B")])
    assert reconcile_drag(items, "A", "A", INDENT) == items


def test_indent_never_adopts_own_descendant():
    items = flatten([N("X", N("X1")), N("Y")])
    out = reconcile_drag(items, "X", "Y", 2 * INDENT)
    assert shape(out) == [("Y", None, 0), ("X", "Y", 1), ("X1", "X", 2)]


# ---------- Outdent ----------

def test_outdent_in_place_lands_after_old_parent():
    items = flatten([N("A", N("C", N("Y"), N("X"), N("Z")))])
    out = reconcile_drag(items, "X", "X", -INDENT)
    assert shape(out) == [
        ("A", None, 0),
        ("C", "A", 1),
        ("X", "A", 1),
        ("Y", "C", 2),
        ("Z", "C", 2),
    ]
    assert shape(normalize(out)) == [
        ("A", None, 0),
        ("C", "A", 1),
        ("Y", "C", 2),
        ("Z", "C", 2),
        ("X", "A", 1),
    ]


def test_outdent_top_level_is_a_no_op():
    items = flatten([N("A"), N("B")])
    assert reconcile_drag(items, "B", "B", -3 * INDENT) == items


# ---------- Depth cap ----------

def _deep_items():
    # P0..P95 is a single chain (depth 0..95); X0 hangs off P89 after P90's
    # subtree, with a 5-deep chain below it (X5 at depth 95).
    p = chain("P", 96)
    x = chain("X", 6)
    p[89].children.append(x[0])
    return flatten([p[0]])


def test_depth_cap_rejects_whole_drag():
    items = _deep_items()
    assert by_id(items)["X0"].depth == 90
    assert by_id(items)["X5"].depth == 95

    out = reconcile_drag(items, "X0", "X0", 6 * INDENT, max_depth=100)
    assert out == items


def test_depth_cap_allows_drag_that_fits():
    items = _deep_items()
    out = reconcile_drag(items, "X0", "X0", 6 * INDENT, max_depth=101)
    moved = by_id(out)
    assert moved["X0"].parent_id == "P95"
    assert moved["X0"].depth == 96
    assert moved["X5"].depth == 101
    assert moved["X5"].parent_id == "X4"
    assert_consistent(out)


def test_depth_cap_applies_to_vertical_moves():
    items = flatten([N("A", N("B", N("C"))), N("D", N("E"))])
    # D sits at depth 0 with E below it; landing beside C puts E at depth 3.
    out = reconcile_drag(items, "D", "C", 0, max_depth=2)
    assert out == items
    out = reconcile_drag(items, "D", "C", 0, max_depth=3)
    assert by_id(out)["E"].depth == 3


# ---------- Invariants over many drags ----------

@pytest.mark.parametrize("max_depth", [1, 2, 100])
def test_every_drag_keeps_tree_consistent(max_depth):
    items = flatten(default_tree())
    all_ids = set(ids(items))
    for active in ids(items):
        for over in ids(items) + [None]:
            for offset in (-48, -24, -12, 0, 12, 24, 48, 72):
                out = normalize(reconcile_drag(items, active, over, offset, max_depth=max_depth))
                assert set(ids(out)) == all_ids
                assert len(out) == len(items)
                assert max(item.depth for item in out) <= max(max_depth, 1)
                assert_consistent(out)
