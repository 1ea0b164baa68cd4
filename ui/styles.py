"""
Shared Tk colours and fonts.
"""

BG_COLOR = "#F5F5F7"
TEXT_COLOR = "#1D1D1F"

FONT_BODY = ("Segoe UI", 11)
