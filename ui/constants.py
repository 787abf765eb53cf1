'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

# Shared UI constants
PADDING = 4
SWATCH_W = 20
DEFAULT_ROW_H = 32
ROW_GAP = 4
OVERLAY_W = 250
DEFAULT_BG_COLOR = wx.Colour(243, 244, 246)
ROW_BG_COLOR = wx.Colour(255, 255, 255)
UNCHECKED_COLOR = wx.Colour(0xD1, 0xD5, 0xDB)

# Checkbox fill per colour tag; unknown tags use "default".
COLOR_MAP = {
    "red": wx.Colour(0xEF, 0x44, 0x44),
    "blue": wx.Colour(0x3B, 0x82, 0xF6),
    "gray": wx.Colour(0xD1, 0xD5, 0xDB),
    "teal": wx.Colour(0x14, 0xB8, 0xA6),
    "green": wx.Colour(0x22, 0xC5, 0x5E),
    "purple": wx.Colour(0xA8, 0x55, 0xF7),
    "default": wx.Colour(0x6B, 0x72, 0x80),
}
