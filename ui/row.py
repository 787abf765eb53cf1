# ui/row.py – one list row: colour checkbox + label

from __future__ import annotations

from dataclasses import dataclass
import wx

from core.types import FlatItem
from ui.constants import COLOR_MAP, ROW_BG_COLOR, UNCHECKED_COLOR

# Drawing constants
HIGHLIGHT_PEN_WIDTH = 2
CORNER_RADIUS = 4
CHECK_PEN_WIDTH = 3
LABEL_GAP = 12

__all__ = ["RowPainter", "RowMetrics", "swatch_colour"]

@dataclass(frozen=True)
class RowMetrics:
    PADDING: int
    SWATCH_W: int
    ROW_GAP: int

def swatch_colour(item: FlatItem) -> wx.Colour:
    """Checkbox fill: the item's colour tag when checked, gray otherwise."""
    if not item.is_checked:
        return UNCHECKED_COLOR
    return COLOR_MAP.get(item.color, COLOR_MAP["default"])

class RowPainter:
    """
    Draw a single row (card + checkbox swatch + label) using wx.GraphicsContext.

    The caller supplies the indentation in pixels so the same painter
    draws list rows (depth * indent) and the floating drag preview
    (depth * indent + pointer offset).
    """

    def __init__(self, view: wx.Window, metrics: RowMetrics) -> None:
        self.view = view
        self.m = metrics

    def draw(
            self,
            gc: wx.GraphicsContext,
            rect: wx.Rect,
            item: FlatItem,
            indent_px: float,
            *,
            highlighted: bool = False,
            ghost: bool = False,
    ) -> None:
        """
        Paint a row.  `rect` is in window coordinates.
        """
        if rect.width <= 0 or rect.height <= 0:
            return

        gc.PushState()
        gc.Clip(rect.x, rect.y, rect.width, rect.height)

        # Card
        card_y = rect.y + self.m.ROW_GAP // 2
        card_h = rect.height - self.m.ROW_GAP
        card_bg = ROW_BG_COLOR
        if ghost:
            # Row being dragged stays in place, faded.
            card_bg = wx.Colour(card_bg.Red(), card_bg.Green(), card_bg.Blue(), 110)
        gc.SetBrush(wx.Brush(card_bg))
        if highlighted:
            sel_color = wx.SystemSettings.GetColour(wx.SYS_COLOUR_HIGHLIGHT)
            gc.SetPen(wx.Pen(sel_color, HIGHLIGHT_PEN_WIDTH))
        else:
            gc.SetPen(wx.Pen(wx.Colour(229, 231, 235)))
        gc.DrawRoundedRectangle(rect.x, card_y, rect.width - 1, card_h, CORNER_RADIUS)

        # Checkbox swatch
        sx = rect.x + self.m.PADDING + indent_px
        sy = card_y + (card_h - self.m.SWATCH_W) / 2
        self._draw_swatch(gc, sx, sy, item)

        # Label
        font = self.view.GetFont()
        text_color = wx.Colour(31, 41, 55) if not ghost else wx.Colour(156, 163, 175)
        gc.SetFont(font, text_color)
        tw, th = gc.GetTextExtent(item.label)
        tx = sx + self.m.SWATCH_W + LABEL_GAP
        ty = card_y + (card_h - th) / 2
        gc.DrawText(item.label, tx, ty)

        gc.PopState()

    def _draw_swatch(self, gc: wx.GraphicsContext, x: float, y: float, item: FlatItem) -> None:
        w = self.m.SWATCH_W
        fill = swatch_colour(item)
        gc.SetBrush(wx.Brush(fill))
        gc.SetPen(wx.Pen(fill))
        gc.DrawRoundedRectangle(x, y, w, w, CORNER_RADIUS)

        if not item.is_checked:
            return

        # White check mark, same proportions as a 24x24 "M5 13l4 4L19 7" path.
        gc.SetPen(wx.Pen(wx.WHITE, CHECK_PEN_WIDTH))
        s = w / 24.0
        gc.StrokeLine(x + 5 * s, y + 13 * s, x + 9 * s, y + 17 * s)
        gc.StrokeLine(x + 9 * s, y + 17 * s, x + 19 * s, y + 7 * s)
