################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the main window's status bar and its log viewer.
'''
################################################################################################

import wx

from core.log import Log

################################################################################################
class LogList(wx.VListBox):
    """Virtual list of log entries: index, timestamp, text (one line each)."""
    INDEX_W = 6
    DATE_W  = 20

    def __init__(self, parent, log, size):
        self.log = log
        super().__init__(parent, style=wx.LB_MULTIPLE | wx.SIMPLE_BORDER, size=size)
        self.font = wx.Font(wx.FontInfo(9).Family(wx.FONTFAMILY_TELETYPE))
        dc = wx.MemoryDC()
        dc.SetFont(self.font)
        self.char_w, self.char_h = dc.GetTextExtent("X")
        self.SetBackgroundColour((0, 0, 0))
        self.SetItemCount(self.log.count())
        self.ScrollToRow(max(0, self.log.count() - 1))

    def OnMeasureItem(self, index):
        return self.char_h + 2

    def OnDrawItem(self, dc, rect, index):
        timestamp, text = self.log.get(index)
        dc.SetFont(self.font)
        dc.SetTextForeground((255, 255, 0))
        dc.DrawText(f"{index}", rect.x, rect.y)
        dc.SetTextForeground((255, 0, 255))
        dc.DrawText(timestamp, rect.x + self.INDEX_W * self.char_w, rect.y)
        dc.SetTextForeground((128, 192, 128))
        dc.DrawText(text.replace("\n", " "), rect.x + (self.INDEX_W + self.DATE_W) * self.char_w, rect.y)

    def OnDrawBackground(self, dc, rect, index):
        colour = (64, 0, 64) if self.IsSelected(index) else (0, 0, 0)
        dc.SetBrush(wx.Brush(colour))
        dc.SetPen(wx.Pen(colour))
        dc.DrawRectangle(rect)

################################################################################################
class StatusBarPopup(wx.PopupTransientWindow):
    WIN_HEIGHT = 300

    def __init__(self, parent, log):
        super().__init__(parent, wx.SIMPLE_BORDER)
        sizer = wx.BoxSizer(wx.VERTICAL)
        self.log_list = LogList(self, log, (parent.GetSize()[0], self.WIN_HEIGHT))
        sizer.Add(self.log_list, 1, wx.EXPAND)
        self.SetSizerAndFit(sizer)

    def OnDismiss(self):
        self.GetParent().popup = None

################################################################################################
class StatusBar(wx.StatusBar):
    """Status bar; right-click opens the log menu."""

    def __init__(self, parent):
        super().__init__(parent)
        self.popup = None
        self.Bind(wx.EVT_RIGHT_DOWN, self.OnRightDown)
        Log.add("Create StatusBar")

    def OnRightDown(self, event):
        menu = wx.Menu()
        item_show = menu.Append(wx.ID_ANY, "Show Log")
        menu.AppendSeparator()
        item_save = menu.Append(wx.ID_SAVE, "Save Log to File...")
        item_clear = menu.Append(wx.ID_CLEAR, "Clear Log")

        self.Bind(wx.EVT_MENU, self.OnShowLog, item_show)
        self.Bind(wx.EVT_MENU, self.OnSaveLogToFile, item_save)
        self.Bind(wx.EVT_MENU, self.OnClearLog, item_clear)

        self.PopupMenu(menu)
        menu.Destroy()

    def OnShowLog(self, event):
        if self.popup is not None:
            self.popup.Dismiss()
            self.popup = None

        self.popup = StatusBarPopup(self, Log)
        x, y = self.ClientToScreen((0, 0))
        self.popup.Position((x, y - StatusBarPopup.WIN_HEIGHT), (0, 0))
        self.popup.Popup()

    def OnSaveLogToFile(self, event):
        with wx.FileDialog(
            self,
            "Save Log to file",
            wildcard="Log files (*.log)|*.log|Text files (*.txt)|*.txt|All files (*.*)|*.*",
            style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT,
        ) as dlg:
            if dlg.ShowModal() == wx.ID_CANCEL:
                return
            path = dlg.GetPath()

        if Log.write_to_file(path):
            self.SetStatusText(f"Log saved to: {path}")
        else:
            self.SetStatusText(f"Could not save log to: {path}")

    def OnClearLog(self, event):
        if wx.MessageBox("Clear the entire log?", "Clear Log", wx.YES_NO | wx.ICON_QUESTION) == wx.YES:
            Log.clear()
            self.SetStatusText("Log cleared")

################################################################################################
