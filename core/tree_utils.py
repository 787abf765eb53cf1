'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.types import FlatItem, ItemId, Node

__all__ = [
    "flatten",
    "build",
    "normalize",
    "descendants",
    "max_descendant_depth",
    "find_item",
    "find_index",
]

# ---------- Tree <-> flat ----------

def flatten(nodes: Iterable[Node], parent_id: Optional[ItemId] = None, depth: int = 0) -> List[FlatItem]:
    """
    Pre-order walk of `nodes`: each node is followed by its own children
    (one level deeper, parented to it) before its next sibling.
    """
    out: List[FlatItem] = []
    _flatten_into(nodes, parent_id, depth, out)
    return out

def _flatten_into(nodes: Iterable[Node], parent_id: Optional[ItemId], depth: int, out: List[FlatItem]) -> None:
    for node in nodes:
        out.append(FlatItem(
            id=node.id,
            label=node.label,
            color=node.color,
            is_checked=node.is_checked,
            parent_id=parent_id,
            depth=depth,
        ))
        _flatten_into(node.children, node.id, depth + 1, out)

def build(items: Iterable[FlatItem]) -> List[Node]:
    """
    Rebuild the nested tree from a flat sequence.

    Children are attached in flat order. Items whose parent_id names no
    known item are dropped together with their subtree; a flat sequence
    caught mid-drag must never make this fail.
    """
    items = list(items)
    by_id: Dict[ItemId, Node] = {}
    for item in items:
        by_id[item.id] = Node(
            id=item.id,
            label=item.label,
            color=item.color,
            is_checked=item.is_checked,
        )

    roots: List[Node] = []
    for item in items:
        node = by_id[item.id]
        if item.parent_id is None:
            roots.append(node)
            continue
        parent = by_id.get(item.parent_id)
        if parent is not None:
            parent.children.append(node)

    return roots

def normalize(items: Iterable[FlatItem]) -> List[FlatItem]:
    """Re-derive parent_id/depth from actual nesting: build, then flatten."""
    return flatten(build(items))

# ---------- Queries ----------

def find_item(items: Iterable[FlatItem], item_id: ItemId) -> Optional[FlatItem]:
    return next((item for item in items if item.id == item_id), None)

def find_index(items: List[FlatItem], item_id: ItemId) -> int:
    """Index of item_id in items, or -1."""
    return next((i for i, item in enumerate(items) if item.id == item_id), -1)

def descendants(items: Iterable[FlatItem], item_id: ItemId) -> List[ItemId]:
    """
    All ids below item_id following parent_id links, in pre-order.

    Always derived from the current parent_id fields, never from row
    positions: callers reorder the sequence freely.
    """
    children_of: Dict[ItemId, List[ItemId]] = {}
    for item in items:
        if item.parent_id is not None:
            children_of.setdefault(item.parent_id, []).append(item.id)

    out: List[ItemId] = []
    seen = {item_id}
    stack = list(reversed(children_of.get(item_id, [])))
    while stack:
        cur = stack.pop()
        if cur in seen:
            continue  # Cycle in malformed input
        seen.add(cur)
        out.append(cur)
        stack.extend(reversed(children_of.get(cur, [])))

    return out

def max_descendant_depth(items: List[FlatItem], item_id: ItemId) -> int:
    """Deepest depth below item_id, or the item's own depth when it is a leaf."""
    item = find_item(items, item_id)
    if item is None:
        return 0
    below = set(descendants(items, item_id))
    depths = [it.depth for it in items if it.id in below]
    return max(depths) if depths else item.depth
