from __future__ import annotations

from typing import Dict, List

from core.types import FlatItem, Node


def N(node_id: str, *children: Node, color: str = "red", checked: bool = False) -> Node:
    return Node(id=node_id, label=f"Item {node_id}", color=color, is_checked=checked, children=list(children))


def chain(prefix: str, count: int) -> List[Node]:
    """prefix0 -> prefix1 -> ... each the only child of the previous one."""
    nodes = [N(f"{prefix}{i}") for i in range(count)]
    for parent, child in zip(nodes, nodes[1:]):
        parent.children.append(child)
    return nodes


def ids(items: List[FlatItem]) -> List[str]:
    return [item.id for item in items]


def shape(items: List[FlatItem]):
    return [(item.id, item.parent_id, item.depth) for item in items]


def by_id(items: List[FlatItem]) -> Dict[str, FlatItem]:
    return {item.id: item for item in items}


def assert_consistent(items: List[FlatItem]) -> None:
    """Depth matches the parent chain and every subtree is one contiguous block."""
    parent_of = {item.id: item.parent_id for item in items}
    for item in items:
        length = 0
        cur = item.parent_id
        while cur is not None:
            assert length <= len(items), f"cycle through {item.id}"
            assert cur in parent_of, f"orphan {item.id}"
            length += 1
            cur = parent_of[cur]
        assert item.depth == length, item

    for i, item in enumerate(items):
        j = i + 1
        while j < len(items) and items[j].depth > item.depth:
            j += 1
        block = {x.id for x in items[i + 1:j]}
        below = set()
        for other in items:
            cur = other.parent_id
            while cur is not None:
                if cur == item.id:
                    below.add(other.id)
                    break
                cur = parent_of[cur]
        assert block == below, item.id
