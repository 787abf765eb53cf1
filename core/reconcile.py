'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, List, Optional, Set

from core.constants import INDENT_W, MAX_DEPTH
from core.log import Log
from core.tree_utils import descendants, find_index, max_descendant_depth
from core.types import FlatItem, ItemId

__all__ = [
    "projected_depth",
    "reconcile_drag",
]

def _round_half_up(value: float) -> int:
    """Round .5 toward +inf, the way pointer offsets are rounded in the view."""
    return int(math.floor(value + 0.5))

def projected_depth(item: FlatItem, offset_x: float, indent_w: int = INDENT_W) -> int:
    """Depth the item would take if dropped with this horizontal offset."""
    if indent_w <= 0:
        return item.depth
    return max(0, item.depth + _round_half_up(offset_x / indent_w))

def _last_index_of_block(items: List[FlatItem], item_id: ItemId) -> int:
    """Index of the last row belonging to item_id or any of its descendants."""
    block = set(descendants(items, item_id))
    block.add(item_id)
    last = -1
    for i, item in enumerate(items):
        if item.id in block:
            last = i
    return last

def _find_new_parent(
        items: List[FlatItem],
        scan_end: int,
        depth: int,
        moving: Set[ItemId],
) -> Optional[FlatItem]:
    """Nearest row above scan_end, outside the moving block, shallower than depth."""
    for i in range(scan_end - 1, -1, -1):
        item = items[i]
        if item.id in moving:
            continue
        if item.depth < depth:
            return item
    return None

def reconcile_drag(
        items: Iterable[FlatItem],
        active_id: ItemId,
        over_id: Optional[ItemId],
        offset_x: float,
        indent_w: int = INDENT_W,
        max_depth: int = MAX_DEPTH,
) -> List[FlatItem]:
    """
    Apply a completed drag to the flat sequence and return the new sequence.

    The active item and its whole subtree move as one block. Its new parent
    and depth come from the horizontal offset (indent/outdent) or, for a
    purely vertical move, from the row it was dropped on. Descendants keep
    their parents and shift depth by the same amount.

    Any drag that cannot be applied (no drop target, unknown ids, dropping
    onto its own subtree, exceeding max_depth) returns the input unchanged.
    The result is provisional: run it through normalize() once the drag
    has settled.
    """
    items = list(items)

    if over_id is None:
        Log.debug(f"Drag of {active_id!r} dropped outside the list.", 2)
        return items

    old_index = find_index(items, active_id)
    over_index = find_index(items, over_id)
    if old_index < 0 or over_index < 0:
        Log.debug(f"Drag ignored, unknown id: {active_id=} {over_id=}.", 1)
        return items

    active = items[old_index]
    over = items[over_index]

    block_ids = descendants(items, active_id)
    moving = set(block_ids)
    moving.add(active_id)
    if over_id in block_ids:
        Log.debug(f"Drag ignored, {over_id!r} is inside the subtree of {active_id!r}.", 1)
        return items

    in_place = over_id == active_id
    moving_down = old_index < over_index

    new_depth = projected_depth(active, offset_x, indent_w)
    is_indenting = new_depth != active.depth

    if is_indenting:
        # Scan upward from the slot the block will land in.
        if in_place:
            scan_end = old_index
        elif moving_down:
            scan_end = _last_index_of_block(items, over_id) + 1
        else:
            scan_end = over_index

        new_parent = _find_new_parent(items, scan_end, new_depth, moving)
        parent_depth = new_parent.depth if new_parent is not None else -1
        new_depth = min(new_depth, parent_depth + 1)
        new_parent_id = new_parent.id if new_parent is not None else None
    else:
        new_parent_id = over.parent_id
        new_depth = over.depth

    depth_difference = new_depth - active.depth

    deepest = max_descendant_depth(items, active_id)
    if deepest + depth_difference > max_depth:
        Log.debug(
            f"Drag of {active_id!r} rejected: depth {deepest + depth_difference} > {max_depth}.", 1
        )
        return items

    Log.debug(
        f"Drag {active_id!r} over {over_id!r}: parent={new_parent_id!r} "
        f"depth {active.depth}->{new_depth} ({depth_difference:+d}).", 2
    )

    updated = []
    for item in items:
        if item.id == active_id:
            item = replace(item, parent_id=new_parent_id, depth=new_depth)
        elif item.id in moving and depth_difference:
            item = replace(item, depth=item.depth + depth_difference)
        updated.append(item)

    by_id = {item.id: item for item in updated}
    block = [by_id[active_id]] + [by_id[i] for i in block_ids]
    remaining = [item for item in updated if item.id not in moving]

    if in_place:
        if is_indenting and depth_difference < 0:
            # Outdent: land right after the old parent.
            insert_at = find_index(remaining, active.parent_id) + 1
        else:
            insert_at = min(old_index, len(remaining))
    elif moving_down:
        if new_parent_id == over_id:
            insert_at = find_index(remaining, over_id) + 1
        else:
            insert_at = _last_index_of_block(remaining, over_id) + 1
    else:
        insert_at = find_index(remaining, over_id)

    return remaining[:insert_at] + block + remaining[insert_at:]
