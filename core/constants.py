'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

# Pixel width of one depth level, both for painting and for turning a
# horizontal drag offset into a depth change.
INDENT_W = 24

# Deepest level any node may reach after a drag.
MAX_DEPTH = 100

# Pointer travel (pixels) before a press turns into a drag.
DRAG_ACTIVATION_PX = 5
