import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

try:
    import tkinter as tk
except ImportError:  # interpreter built without Tk
    tk = None

if tk is not None:
    from ui.label_window import LABELS, WINDOW_TITLE, LabelWindow, build_root
    from ui.styles import BG_COLOR, TEXT_COLOR


@unittest.skipIf(tk is None, "tkinter is not available")
class TestLabelWindow(unittest.TestCase):

    def setUp(self):
        try:
            self.root, self.window = build_root()
        except tk.TclError as e:
            self.skipTest(f"no display available: {e}")

    def tearDown(self):
        try:
            self.root.destroy()
        except tk.TclError:
            pass

    def test_title(self):
        self.assertEqual(self.root.title(), WINDOW_TITLE)

    def test_labels_are_placed_at_fixed_positions(self):
        self.assertEqual(len(self.window.labels), len(LABELS))
        for label, (text, x, y) in zip(self.window.labels, LABELS):
            info = label.place_info()
            self.assertEqual(label.cget("text"), text)
            self.assertEqual(int(info["x"]), x)
            self.assertEqual(int(info["y"]), y)

    def test_labels_use_shared_styles(self):
        for label in self.window.labels:
            self.assertEqual(label.cget("fg"), TEXT_COLOR)
            self.assertEqual(label.cget("bg"), BG_COLOR)

    def test_close_runs_callback_and_destroys(self):
        calls = []
        top = tk.Toplevel(self.root)
        window = LabelWindow(top, on_close=lambda: calls.append("closed"))
        window.close()
        self.assertEqual(calls, ["closed"])
        self.assertFalse(bool(top.winfo_exists()))


if __name__ == '__main__':
    unittest.main()
