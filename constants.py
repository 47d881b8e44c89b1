"""
Global constants used throughout the project
"""

# Rendering of trees with rich
DISPLAY_MAX_DEPTH = 32  # Subtrees below this depth are collapsed to an ellipsis
DISPLAY_GUIDE_STYLE = "bold bright_blue"
DISPLAY_ELLIPSIS = "…"
