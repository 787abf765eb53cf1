'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Union

from core.constants import INDENT_W, MAX_DEPTH
from core.log import Log
from core.reconcile import projected_depth, reconcile_drag
from core.tree_utils import build, descendants, find_item, flatten, normalize
from core.types import FlatItem, ItemId, Node

__all__ = [
    "DragStart",
    "DragMove",
    "DragEnd",
    "DragCancel",
    "DragOverlay",
    "DragController",
]

# ---------- Events from the drag sensor ----------

@dataclass(frozen=True)
class DragStart:
    active_id: ItemId

@dataclass(frozen=True)
class DragMove:
    delta_x: float

@dataclass(frozen=True)
class DragEnd:
    active_id: ItemId
    over_id: Optional[ItemId] = None

@dataclass(frozen=True)
class DragCancel:
    pass

DragEvent = Union[DragStart, DragMove, DragEnd, DragCancel]

@dataclass(frozen=True)
class DragOverlay:
    """What the floating preview needs: the item, its indentation in pixels and
    the depth it would take if dropped now."""
    item: FlatItem
    offset_x: float
    indent_px: float
    depth: int


class DragController:
    """
    Owns the committed flat sequence and the provisional state of the
    drag in progress (active id + latest horizontal offset).

    Only a drag end changes the sequence. Every time a drag settles (end
    or cancel) the sequence is rebuilt from its own nesting, so parent_id
    and depth always match what the user sees.
    """

    def __init__(
            self,
            items: Iterable[FlatItem],
            indent_w: int = INDENT_W,
            max_depth: int = MAX_DEPTH,
    ):
        self.indent_w = indent_w
        self.max_depth = max_depth
        self._lock = threading.RLock()
        self._items: List[FlatItem] = normalize(items)
        self._active_id: Optional[ItemId] = None
        self._offset_x: float = 0.0

    @classmethod
    def from_tree(cls, nodes: Iterable[Node], **kwargs) -> "DragController":
        return cls(flatten(nodes), **kwargs)

    # ------------------------------------------------------------------ #
    # State exposed to the view
    # ------------------------------------------------------------------ #

    @property
    def items(self) -> List[FlatItem]:
        with self._lock:
            return list(self._items)

    @property
    def active_id(self) -> Optional[ItemId]:
        return self._active_id

    @property
    def offset_x(self) -> float:
        return self._offset_x

    def is_dragging(self) -> bool:
        return self._active_id is not None

    def tree(self) -> List[Node]:
        with self._lock:
            return build(self._items)

    def hidden_ids(self) -> Set[ItemId]:
        """Descendants of the dragged item; drawn only inside the drag preview."""
        with self._lock:
            if self._active_id is None:
                return set()
            return set(descendants(self._items, self._active_id))

    def overlay(self) -> Optional[DragOverlay]:
        with self._lock:
            if self._active_id is None:
                return None
            item = find_item(self._items, self._active_id)
            if item is None:
                return None
            return DragOverlay(
                item=item,
                offset_x=self._offset_x,
                indent_px=item.depth * self.indent_w + self._offset_x,
                depth=projected_depth(item, self._offset_x, self.indent_w),
            )

    def replace_items(self, items: Iterable[FlatItem]) -> None:
        """Swap in a new sequence (e.g. a reloaded seed) and drop any drag."""
        with self._lock:
            self._active_id = None
            self._offset_x = 0.0
            self._items = normalize(items)

    # ------------------------------------------------------------------ #
    # Event handling
    # ------------------------------------------------------------------ #

    def dispatch(self, event: DragEvent) -> bool:
        """
        Route one drag event. Returns True when the committed sequence
        changed.
        """
        if isinstance(event, DragStart):
            self.drag_start(event.active_id)
            return False
        if isinstance(event, DragMove):
            self.drag_move(event.delta_x)
            return False
        if isinstance(event, DragEnd):
            return self.drag_end(event.active_id, event.over_id)
        if isinstance(event, DragCancel):
            self.drag_cancel()
            return False
        raise TypeError(f"Unknown drag event: {event!r}")

    def drag_start(self, active_id: ItemId) -> None:
        with self._lock:
            self._active_id = active_id
            self._offset_x = 0.0
        Log.debug(f"Drag start: {active_id!r}", 2)

    def drag_move(self, delta_x: float) -> None:
        # Latest offset wins; moves never touch the sequence.
        with self._lock:
            self._offset_x = delta_x

    def drag_cancel(self) -> None:
        with self._lock:
            Log.debug(f"Drag cancelled: {self._active_id!r}", 2)
            self._settle()

    def drag_end(self, active_id: ItemId, over_id: Optional[ItemId]) -> bool:
        with self._lock:
            before = self._items
            self._items = reconcile_drag(
                before,
                active_id,
                over_id,
                self._offset_x,
                indent_w=self.indent_w,
                max_depth=self.max_depth,
            )
            self._settle()
            changed = self._items != before

        if changed:
            Log.debug(f"Moved {active_id!r} (over {over_id!r}).", 1)
        return changed

    def _settle(self) -> None:
        """Drop the provisional drag state and re-derive parents/depths."""
        self._active_id = None
        self._offset_x = 0.0
        self._items = normalize(self._items)
