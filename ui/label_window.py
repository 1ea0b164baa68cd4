"""
Label Window
============
Small stand-alone Tk window with two labels at fixed pixel positions.
It shares nothing with the sorter; closing the window ends the event loop.

Run:  python -m ui.label_window
"""

import tkinter as tk
from typing import Callable, Optional, Tuple
from ui.styles import BG_COLOR, TEXT_COLOR, FONT_BODY

WINDOW_TITLE = "Panes"
WINDOW_SIZE = (300, 400)
BORDER_WIDTH = 5

# (text, x, y) in pixels, relative to the container
LABELS = [
    ("Enter the following info...", 0, 0),
    ("Name: ", 20, 30),
]


class LabelWindow(tk.Frame):
    """
    Absolute-layout container: every child is placed with explicit x/y,
    nothing is packed or gridded inside it.
    """

    def __init__(self, master, on_close: Optional[Callable[[], None]] = None):
        super().__init__(master, bg=BG_COLOR)
        self.on_close = on_close
        self.labels = []

        for text, x, y in LABELS:
            label = tk.Label(self, text=text, font=FONT_BODY, bg=BG_COLOR, fg=TEXT_COLOR)
            label.place(x=x, y=y)
            self.labels.append(label)

        self.winfo_toplevel().protocol("WM_DELETE_WINDOW", self.close)

    def close(self):
        """Window-close handler: notify, then tear down the toplevel."""
        if self.on_close is not None:
            self.on_close()
        self.winfo_toplevel().destroy()


def build_root() -> Tuple[tk.Tk, LabelWindow]:
    root = tk.Tk()
    root.title(WINDOW_TITLE)
    width, height = WINDOW_SIZE
    root.geometry(f"{width}x{height}")
    root.minsize(width, height)
    root.configure(bg=BG_COLOR)

    window = LabelWindow(root)
    window.pack(fill=tk.BOTH, expand=True, padx=BORDER_WIDTH, pady=BORDER_WIDTH)
    return root, window


def main():
    root, _ = build_root()
    root.mainloop()


if __name__ == "__main__":
    main()
