# ui/mouse.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

from __future__ import annotations

import math
import wx

from core.constants import DRAG_ACTIVATION_PX
from core.drag import DragCancel, DragEnd, DragMove, DragStart
from core.log import Log

# ---------------------------------------------------------------------------
# row hit-testing helpers
# ---------------------------------------------------------------------------

def row_at_window_y(view, ywin: int) -> int:
    """Map a window-Y coordinate to an index into view._visible, or -1."""
    if not view._visible:
        return -1

    unit_y = view.GetScrollPixelsPerUnit()[1]
    scroll_y_px = view.GetViewStart()[1] * unit_y

    y = scroll_y_px + int(ywin)
    if y < 0:
        return -1
    idx = y // view.ROW_H
    return int(idx) if idx < len(view._visible) else -1

def item_id_at(view, ywin: int):
    idx = row_at_window_y(view, ywin)
    return view._visible[idx].id if idx >= 0 else None

# ---------------------------------------------------------------------------
# event handlers
# ---------------------------------------------------------------------------

def handle_left_down(view, evt: wx.MouseEvent) -> bool:
    """
    • row press → remember item + origin; becomes a drag after enough travel
    • empty space → nothing to drag
    """
    pos = evt.GetPosition()
    item_id = item_id_at(view, pos.y)
    view.SetFocus()

    if item_id is None:
        view._press = None
        return True

    view._press = (item_id, pos)
    if not view.HasCapture():
        view.CaptureMouse()
    return True

def handle_motion(view, evt: wx.MouseEvent) -> bool:
    """Start the drag once past the activation distance, then report the offset."""
    if view._press is None or not evt.Dragging():
        return False

    active_id, origin = view._press
    pos = evt.GetPosition()
    dx = pos.x - origin.x
    dy = pos.y - origin.y

    controller = view.controller
    if not controller.is_dragging():
        if math.hypot(dx, dy) < DRAG_ACTIVATION_PX:
            return True
        controller.dispatch(DragStart(active_id))
        # Descendants of the dragged row disappear from the list.
        view.refresh_rows()

    controller.dispatch(DragMove(dx))
    view._pointer_y = pos.y
    view._over_id = item_id_at(view, pos.y)
    overlay = controller.overlay()
    if overlay is not None:
        Log.debug(f"Drag over {view._over_id!r}, depth {overlay.depth}.", 3)
    view.Refresh(False)
    return True

def handle_left_up(view, evt: wx.MouseEvent) -> bool:
    """Finish the drag: drop on the row under the pointer (None outside the rows)."""
    if view.HasCapture():
        view.ReleaseMouse()

    press = view._press
    view._press = None
    controller = view.controller
    if press is None or not controller.is_dragging():
        return True

    active_id = controller.active_id
    over_id = item_id_at(view, evt.GetPosition().y)
    changed = controller.dispatch(DragEnd(active_id, over_id))

    view._over_id = None
    view._pointer_y = None
    view.refresh_rows()

    if changed:
        view.SetStatusText(f"Moved '{_label(controller, active_id)}'")
    elif over_id is None:
        view.SetStatusText("Dropped outside the list")
    else:
        view.SetStatusText("No change")
    return True

def cancel_drag(view) -> bool:
    """Abort the drag in progress, if any. Returns True if one was cancelled."""
    view._press = None
    view._over_id = None
    view._pointer_y = None
    if not view.controller.is_dragging():
        return False

    view.controller.dispatch(DragCancel())
    view.refresh_rows()
    view.SetStatusText("Drag cancelled")
    return True

def handle_capture_lost(view, evt: wx.MouseCaptureLostEvent) -> bool:
    Log.debug("Mouse capture lost during drag.", 2)
    cancel_drag(view)
    return True

def handle_key_event(view, evt: wx.KeyEvent) -> bool:
    if evt.GetKeyCode() != wx.WXK_ESCAPE:
        return False
    if view.HasCapture():
        view.ReleaseMouse()
    return cancel_drag(view)

def _label(controller, item_id) -> str:
    for item in controller.items:
        if item.id == item_id:
            return item.label
    return str(item_id)
