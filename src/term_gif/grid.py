"""
.. The Cell Grid

A terminal-sized grid of character cells, addressed by ``x + y * width``.
"""

from __future__ import annotations

__all__ = ("DEFAULT", "Cell", "CellBuffer")

from dataclasses import dataclass
from typing import Iterator, List

from ._utils import arg_type_error, arg_value_error_range
from .geometry import Size

#: The terminal's default color attribute
DEFAULT = 0


@dataclass
class Cell:
    """One terminal grid position."""

    ch: str = " "
    fg: int = DEFAULT
    bg: int = DEFAULT


class CellBuffer:
    """A grid of cells.

    Args:
        width: Number of columns.
        height: Number of lines.

    Raises:
        TypeError: An argument is of an inappropriate type.
        ValueError: A dimension is negative.

    All cells start out blank (a space on the default colors).
    """

    __slots__ = ("_cells", "_width", "_height")

    def __init__(self, width: int, height: int) -> None:
        self._cells: List[Cell] = []
        self._width = self._height = 0
        self.resize(width, height)

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        x, y = position
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Cell position out of range (got: {position!r})")

        return self._cells[x + y * self._width]

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self._width}x{self._height}>"

    cells = property(
        lambda self: self._cells,
        doc="""The cells, row after row

        :type: List[Cell]
        """,
    )

    width = property(lambda self: self._width, doc="Number of columns")

    height = property(lambda self: self._height, doc="Number of lines")

    size = property(
        lambda self: Size(self._width, self._height), doc="The grid's dimensions"
    )

    def clear(self, ch: str = " ", fg: int = DEFAULT, bg: int = DEFAULT) -> None:
        """Resets every cell."""
        for cell in self._cells:
            cell.ch = ch
            cell.fg = fg
            cell.bg = bg

    def resize(self, width: int, height: int) -> None:
        """Changes the grid's dimensions.

        Raises:
            TypeError: An argument is of an inappropriate type.
            ValueError: A dimension is negative.

        The contents are discarded if the dimensions change.
        """
        if not isinstance(width, int):
            raise arg_type_error("width", width)
        if width < 0:
            raise arg_value_error_range("width", width)
        if not isinstance(height, int):
            raise arg_type_error("height", height)
        if height < 0:
            raise arg_value_error_range("height", height)

        if (width, height) != (self._width, self._height):
            self._cells = [Cell() for _ in range(width * height)]
            self._width, self._height = width, height

    def rows(self) -> Iterator[List[Cell]]:
        """Yields the cells of each line, top to bottom."""
        cells, width = self._cells, self._width
        for y in range(self._height):
            yield cells[y * width : (y + 1) * width]
