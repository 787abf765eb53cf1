'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, List, Optional

ItemId = Hashable


@dataclass(slots=True)
class Node:
    """
    One entry of the nested tree.

    • id          – opaque, stable, unique across the whole collection
    • label       – display text
    • color       – colour tag name, e.g. "red"
    • is_checked  – checkbox state
    • children    – ordered child nodes (owned by this node)
    """
    id: ItemId
    label: str = ""
    color: str = "default"
    is_checked: bool = False
    children: List[Node] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class FlatItem:
    """
    A single row of the flattened tree.

    Sibling order is the position in the flat sequence; there is no
    explicit child list here.
    """
    id: ItemId
    label: str
    color: str
    is_checked: bool
    parent_id: Optional[ItemId]
    depth: int
