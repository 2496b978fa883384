from term_gif.color import Color
from term_gif.decode import Frame
from term_gif.geometry import Rect

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
CLEAR = Color(0, 0, 0, 0)

# Attributes of the above colors with the RGB cube mapper
RED_ATTR = 17 + 5 * 36
GREEN_ATTR = 17 + 5 * 6
BLUE_ATTR = 17 + 5


def make_frame(rows, palette, stride=None):
    """Builds a frame from rows of palette indices.

    Each row is padded with index 0 up to *stride*.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    stride = width if stride is None else stride
    pixels = b"".join(bytes(row) + bytes(stride - width) for row in rows)

    return Frame(Rect(0, 0, width, height), stride, pixels, tuple(palette))


def snapshot(grid):
    return [(cell.ch, cell.fg, cell.bg) for cell in grid.cells]


class FakeScreen:
    """Stands in for an urwid screen"""

    def __init__(self, size=(80, 24)):
        self.size = size
        self.colors = 16
        self.palette = {}

    def get_cols_rows(self):
        return self.size

    def register_palette_entry(
        self,
        name,
        foreground,
        background,
        mono=None,
        foreground_high=None,
        background_high=None,
    ):
        self.palette[name] = (
            foreground,
            background,
            mono,
            foreground_high,
            background_high,
        )

    def set_terminal_properties(
        self, colors=None, bright_is_bold=None, has_underline=None
    ):
        if colors is not None:
            self.colors = colors


class FakeLoop:
    """Stands in for an urwid main loop"""

    def __init__(self):
        self.alarms = []
        self.removed = []

    def set_alarm_in(self, sec, callback, user_data=None):
        handle = (len(self.alarms), sec, callback)
        self.alarms.append(handle)
        return handle

    def remove_alarm(self, handle):
        self.removed.append(handle)
        return True
