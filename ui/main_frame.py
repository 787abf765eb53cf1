'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from typing import Optional

import wx

from core.constants import INDENT_W, MAX_DEPTH
from core.drag import DragController
from core.log import Log
from core.seed import load_seed
from core.tree_utils import flatten
from ui.statusbar import StatusBar
from ui.view import TreeView


class MainFrame(wx.Frame):
    """Main application frame: menu, sortable tree view, status bar."""

    def __init__(
            self,
            verbosity: int = 0,
            seed_path: Optional[str] = None,
            indent_w: int = INDENT_W,
            max_depth: int = MAX_DEPTH,
    ):
        super().__init__(None, title="Sortable Tree", size=(480, 640))
        self.SetMinSize((320, 400))

        Log.set_verbosity(verbosity)
        self.seed_path = None
        self.controller = DragController(
            [],
            indent_w=indent_w,
            max_depth=max_depth,
        )

        self._build_menu()
        self.SetStatusBar(StatusBar(self))
        self._build_body()

        # A bad seed file falls back to the built-in tree.
        if not self._load(seed_path) and seed_path is not None:
            self._load(None)

    # ---------------- Layout ----------------

    def _build_menu(self):
        menubar = wx.MenuBar()

        m_file = wx.Menu()
        m_open = m_file.Append(wx.ID_OPEN, "&Open Seed...\tCtrl+O")
        m_reload = m_file.Append(wx.ID_REFRESH, "&Reload Seed\tCtrl+R")
        m_file.AppendSeparator()
        m_quit = m_file.Append(wx.ID_EXIT, "&Quit\tCtrl+Q")
        menubar.Append(m_file, "&File")

        self.SetMenuBar(menubar)
        self.Bind(wx.EVT_MENU, self.on_open_seed, m_open)
        self.Bind(wx.EVT_MENU, self.on_reload_seed, m_reload)
        self.Bind(wx.EVT_MENU, lambda evt: self.Close(), m_quit)

    def _build_body(self):
        panel = wx.Panel(self)
        s = wx.BoxSizer(wx.VERTICAL)
        self.view = TreeView(panel, self.controller)
        s.Add(self.view, 1, wx.EXPAND | wx.ALL, 6)
        panel.SetSizer(s)

    # ---------------- Seed loading ----------------

    def _load(self, path: Optional[str]) -> bool:
        try:
            nodes = load_seed(path)
        except ValueError as e:
            Log.debug(f"Seed load failed: {e}", 0)
            wx.MessageBox(str(e), "Could not load seed", wx.OK | wx.ICON_ERROR)
            return False

        self.seed_path = path
        self.view.set_items(flatten(nodes))
        self.SetStatusText(f"Loaded {len(self.controller.items)} items")
        return True

    def on_open_seed(self, event=None):
        with wx.FileDialog(
            self,
            "Open seed file",
            wildcard="JSON files (*.json)|*.json|All files (*.*)|*.*",
            style=wx.FD_OPEN | wx.FD_FILE_MUST_EXIST,
        ) as dlg:
            if dlg.ShowModal() == wx.ID_CANCEL:
                return
            self._load(dlg.GetPath())

    def on_reload_seed(self, event=None):
        self._load(self.seed_path)
