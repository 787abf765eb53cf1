# ui/view.py

from __future__ import annotations

import wx
from typing import List, Optional

# -----------------------------------------------------------------------------
# project imports
# -----------------------------------------------------------------------------

from core.constants import INDENT_W
from core.drag import DragController
from core.log import Log
from core.types import FlatItem

from ui.constants import (
    PADDING,
    SWATCH_W,
    ROW_GAP,
    DEFAULT_ROW_H,
    DEFAULT_BG_COLOR,
)
from ui.row import RowPainter, RowMetrics
from ui.mouse import (
    handle_left_down,
    handle_left_up,
    handle_motion,
    handle_capture_lost,
    handle_key_event,
)
from ui.paint import paint_background, paint_rows, paint_overlay

# =============================================================================
class TreeView(wx.ScrolledWindow):
    """
    GraphicsContext-based view of the flat item list with drag-to-reorder
    and drag-to-indent.

    All structural state lives in the DragController; the view only keeps
    what it needs to paint (visible rows, pointer, row under the pointer).
    """

    def __init__(self, parent: wx.Window, controller: DragController):
        super().__init__(parent, style=wx.BORDER_SIMPLE | wx.WANTS_CHARS)

        self.controller = controller
        self.indent_w = controller.indent_w or INDENT_W
        self.main_frame = wx.GetApp().GetTopWindow()

        # rows currently drawn (committed items minus hidden descendants)
        self._visible: List[FlatItem] = []

        # pointer state for drag operations
        self._press = None
        self._pointer_y: Optional[int] = None
        self._over_id = None

        # row painter
        self._metrics = RowMetrics(PADDING=PADDING, SWATCH_W=SWATCH_W, ROW_GAP=ROW_GAP)
        self._row_painter = RowPainter(self, self._metrics)

        # appearance + scrolling
        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.SetDoubleBuffered(True)
        self.SetBackgroundColour(DEFAULT_BG_COLOR)
        self.SetScrollRate(0, 1)

        dc = wx.ClientDC(self)
        dc.SetFont(self.GetFont())
        lh = dc.GetTextExtent("Ag")[1]
        self.ROW_H = max(lh + 2 * PADDING + ROW_GAP, DEFAULT_ROW_H)

        # event bindings
        self.Bind(wx.EVT_PAINT, self._on_paint)
        self.Bind(wx.EVT_SIZE, self._on_size)
        self.Bind(wx.EVT_CHAR_HOOK, self._on_char)
        self.Bind(wx.EVT_LEFT_DOWN, self._on_left_down)
        self.Bind(wx.EVT_LEFT_UP, self._on_left_up)
        self.Bind(wx.EVT_MOTION, self._on_motion)
        self.Bind(wx.EVT_MOUSE_CAPTURE_LOST, self._on_capture_lost)

        self.refresh_rows()

    # ------------------------------------------------------------------ #
    # rebuilding
    # ------------------------------------------------------------------ #

    def refresh_rows(self) -> None:
        """Recompute the drawn rows from the controller and repaint."""
        hidden = self.controller.hidden_ids()
        self._visible = [item for item in self.controller.items if item.id not in hidden]
        self.SetVirtualSize((-1, len(self._visible) * self.ROW_H))
        Log.debug(f"View rows: {len(self._visible)} visible, {len(hidden)} hidden.", 3)
        self.Refresh(False)

    def set_items(self, items: List[FlatItem]) -> None:
        self.controller.replace_items(items)
        self.refresh_rows()

    def SetStatusText(self, text: str) -> None:
        try:
            self.main_frame.SetStatusText(text)
        except (AttributeError, RuntimeError):
            Log.debug(text, 1)

    # ------------------------------------------------------------------ #
    # painting
    # ------------------------------------------------------------------ #

    def _on_paint(self, _evt: wx.PaintEvent):
        dc = wx.AutoBufferedPaintDC(self)
        gc = wx.GraphicsContext.Create(dc)
        ch = self.GetClientSize().height

        paint_background(self, gc, ch)
        paint_rows(self, gc, ch)
        paint_overlay(self, gc)

    # ------------------------------------------------------------------ #
    # event dispatch
    # ------------------------------------------------------------------ #

    def _on_left_down(self, evt):
        if handle_left_down(self, evt):
            return
        evt.Skip()

    def _on_left_up(self, evt):
        if handle_left_up(self, evt):
            return
        evt.Skip()

    def _on_motion(self, evt):
        if handle_motion(self, evt):
            return
        evt.Skip()

    def _on_capture_lost(self, evt):
        handle_capture_lost(self, evt)

    def _on_char(self, evt):
        if handle_key_event(self, evt):
            return
        evt.Skip()

    def _on_size(self, _evt: wx.SizeEvent):
        self.Refresh(False)
        _evt.Skip()
