'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import wx

from ui.constants import DEFAULT_BG_COLOR, OVERLAY_W

def paint_background(view, gc: wx.GraphicsContext, client_h: int) -> None:
    """Fill full client area with the background colour."""
    w = view.GetClientSize().width

    bg = view.GetBackgroundColour()
    if not bg.IsOk():
        bg = DEFAULT_BG_COLOR

    gc.SetBrush(wx.Brush(bg))
    gc.SetPen(wx.Pen(bg))
    gc.DrawRectangle(0, 0, w, client_h)

def paint_rows(view, gc: wx.GraphicsContext, client_h: int) -> int:
    """
    Draw the visible rows that intersect the window. Returns the Y
    coordinate just past the last painted row.
    """
    rows = view._visible
    if not rows:
        return 0

    w = view.GetClientSize().width
    scroll_y_px = view.GetViewStart()[1] * view.GetScrollPixelsPerUnit()[1]
    first = max(0, scroll_y_px // view.ROW_H)
    y = first * view.ROW_H - scroll_y_px
    i = first

    active_id = view.controller.active_id
    dragging = active_id is not None

    while i < len(rows) and y < client_h:
        item = rows[i]
        rect = wx.Rect(0, y, w, view.ROW_H)
        view._row_painter.draw(
            gc,
            rect,
            item,
            item.depth * view.indent_w,
            highlighted=dragging and item.id == view._over_id,
            ghost=item.id == active_id,
        )
        y += view.ROW_H
        i += 1

    return y

def paint_overlay(view, gc: wx.GraphicsContext) -> None:
    """Draw the floating preview of the dragged item under the pointer."""
    overlay = view.controller.overlay()
    if overlay is None or view._pointer_y is None:
        return

    indent = max(0, int(overlay.indent_px))
    rect = wx.Rect(0, int(view._pointer_y - view.ROW_H // 2), indent + OVERLAY_W, view.ROW_H)
    view._row_painter.draw(gc, rect, overlay.item, indent, highlighted=True)
