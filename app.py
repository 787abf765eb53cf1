# app.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import sys
import traceback
import wx

from core.constants import INDENT_W, MAX_DEPTH
from core.log import Log

def on_exception(exc_type, exc_value, exc_traceback):
    """Show unhandled exceptions in the log / status bar instead of silent failure."""
    if issubclass(exc_type, KeyboardInterrupt):
        # Allow Ctrl+C to work normally
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    tb_text = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    error_message = f"!ERROR! Unhandled Exception:\n{tb_text}"
    Log.debug(error_message, 0)

    main_frame = wx.GetApp().GetTopWindow() if wx.GetApp() else None
    if main_frame is not None and hasattr(main_frame, 'SetStatusText'):
        main_frame.SetStatusText(error_message.splitlines()[-1])
    else:
        print(error_message, file=sys.stderr)

if tuple(getattr(wx, 'VERSION', (0,0,0))[:3]) < (4, 2, 3):
    raise RuntimeError(f"SortableTree requires wxPython ≥ 4.2.3; found {wx.__version__}")

from ui.main_frame import MainFrame

def main(
        verbosity: int = 0,
        stdexp: bool = False,
        seed_path: str | None = None,
        indent_w: int = INDENT_W,
        max_depth: int = MAX_DEPTH,
):
    # Install the exception handler
    if not stdexp:
        sys.excepthook = on_exception

    app = wx.App(False)

    frame = MainFrame(
        verbosity=verbosity,
        seed_path=seed_path,
        indent_w=indent_w,
        max_depth=max_depth,
    )
    frame.Show()

    return app.MainLoop()
