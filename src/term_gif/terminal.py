"""
.. The Terminal

Output mode negotiation, the cell buffer and its urwid widget.
"""

from __future__ import annotations

__all__ = ("OutputMode", "Terminal", "CellGrid")

import logging as _logging
from enum import Enum
from typing import Dict, Optional, Tuple

import urwid

from ._utils import arg_type_error, arg_value_error_range, supports_256_colors
from .geometry import Size
from .grid import DEFAULT, CellBuffer

# Names of the eight colors of the normal output mode, in xterm order
_BASIC_COLORS = (
    "black",
    "dark red",
    "dark green",
    "brown",
    "dark blue",
    "dark magenta",
    "dark cyan",
    "light gray",
)


class OutputMode(Enum):
    """Terminal color output modes.

    Attributes ``1`` to ``n_attributes`` select the terminal colors starting at
    ``base``. Attribute ``0`` is always the terminal's default color.
    """

    #: Attributes 1 to 8 select the eight basic colors
    NORMAL = (16, 0, 8)

    #: Attributes 1 to 256 select colors 0 to 255
    COLORS_256 = (256, 0, 256)

    #: Attributes 1 to 24 select the grayscale ramp, colors 232 to 255
    GRAYSCALE = (256, 232, 24)

    def __init__(self, colors: int, base: int, n_attributes: int) -> None:
        self.colors = colors
        self.base = base
        self.n_attributes = n_attributes


class Terminal:
    """The terminal an animation is drawn to.

    Args:
        screen: The urwid screen to draw on. If ``None``, a new raw display screen
          is created.
        force: If ``True``, the detection of 256-color support is skipped.

    The terminal starts out in :py:attr:`OutputMode.NORMAL`.
    """

    def __init__(
        self, screen: Optional[urwid.BaseScreen] = None, *, force: bool = False
    ) -> None:
        if not isinstance(force, bool):
            raise arg_type_error("force", force)

        self.screen = urwid.raw_display.Screen() if screen is None else screen
        self._force = force
        self._output_mode = OutputMode.NORMAL
        self._buffer = CellBuffer(0, 0)
        self._entries: Dict[Tuple[int, int], str] = {}

    buffer = property(
        lambda self: self._buffer,
        doc="""The cell buffer, as sized at the last call to :py:meth:`cells`

        :type: CellBuffer
        """,
    )

    output_mode = property(
        lambda self: self._output_mode,
        doc="""The current output mode

        :type: OutputMode
        """,
    )

    def cells(self) -> CellBuffer:
        """Returns the cell buffer, resized to the current terminal size.

        The contents are discarded if the terminal size changed since the last
        call.
        """
        self._buffer.resize(*self.size())
        return self._buffer

    def color_name(self, attr: int) -> str:
        """Returns the urwid color name for an attribute in the current output mode.

        Raises:
            ValueError: *attr* is out of range for the current output mode.
        """
        if attr == DEFAULT:
            return "default"

        mode = self._output_mode
        if not 1 <= attr <= mode.n_attributes:
            raise arg_value_error_range("attr", attr, f"mode: {mode.name}")

        if mode is OutputMode.NORMAL:
            return _BASIC_COLORS[attr - 1]
        return f"h{mode.base + attr - 1}"

    def palette_entry(self, fg: int, bg: int) -> str:
        """Returns the name of the screen palette entry for a pair of cell
        attributes, registering the entry if necessary.

        Raises:
            ValueError: An attribute is out of range for the current output mode.
        """
        try:
            return self._entries[(fg, bg)]
        except KeyError:
            pass

        mode = self._output_mode
        name = f"{mode.name.lower()} {fg} {bg}"
        fg_name, bg_name = self.color_name(fg), self.color_name(bg)
        if mode is OutputMode.NORMAL:
            self.screen.register_palette_entry(name, fg_name, bg_name)
        else:
            self.screen.register_palette_entry(
                name, "default", "default", None, fg_name, bg_name
            )
        self._entries[(fg, bg)] = name

        return name

    def set_output_mode(self, mode: OutputMode) -> OutputMode:
        """Requests an output mode.

        Returns:
            The output mode in effect afterwards; *mode* if it was established,
            otherwise the previous output mode.

        Raises:
            TypeError: *mode* is not an :py:class:`OutputMode`.

        Modes requiring 256 colors are only established if the terminal is
        detected to support them, unless detection is disabled with *force*.
        """
        if not isinstance(mode, OutputMode):
            raise arg_type_error("mode", mode)

        if mode.colors > 16 and not (self._force or supports_256_colors()):
            _logger.warning(
                f"256-color output is not supported by the active terminal; "
                f"output mode stays {self._output_mode.name}"
            )
            return self._output_mode

        self.screen.set_terminal_properties(colors=mode.colors)
        if mode is not self._output_mode:
            self._output_mode = mode
            self._entries.clear()
            _logger.info(f"Output mode set to {mode.name}")

        return mode

    def size(self) -> Size:
        """Returns the current size of the terminal, in columns and lines."""
        return Size(*self.screen.get_cols_rows())


class CellGrid(urwid.Widget):
    """Box widget displaying the cell buffer of a terminal.

    Args:
        terminal: The terminal whose buffer is displayed.

    | The buffer is cropped to the render size, and any ample space is filled with
      blank cells.
    | The widget is not redrawn on its own; call ``_invalidate()`` after the
      buffer changes.
    """

    _sizing = frozenset((urwid.BOX,))
    ignore_focus = True

    def __init__(self, terminal: Terminal) -> None:
        if not isinstance(terminal, Terminal):
            raise arg_type_error("terminal", terminal)

        super().__init__()
        self._tg_terminal = terminal

    def render(self, size: Tuple[int, int], focus: bool = False) -> urwid.Canvas:
        maxcol, maxrow = size
        palette_entry = self._tg_terminal.palette_entry
        markup = []

        for y, row in enumerate(self._tg_terminal.buffer.rows()):
            if y == maxrow:
                break
            if y:
                markup.append("\n")

            # Consecutive cells with the same colors share one markup segment
            run_colors, run_chars = None, []
            for cell in row[:maxcol]:
                colors = (cell.fg, cell.bg)
                if colors != run_colors:
                    if run_chars:
                        markup.append((palette_entry(*run_colors), "".join(run_chars)))
                    run_colors, run_chars = colors, []
                run_chars.append(cell.ch)
            if run_chars:
                markup.append((palette_entry(*run_colors), "".join(run_chars)))

        canv = urwid.CompositeCanvas(
            urwid.Text(markup or "", wrap="clip").render((maxcol,))
        )
        canv.pad_trim_top_bottom(0, maxrow - canv.rows())

        return canv


_logger = _logging.getLogger(__name__)
