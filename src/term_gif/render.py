"""
.. Frame Renderers

Paint a decoded frame into a :py:class:`~term_gif.grid.CellBuffer`.

Both renderers crop the frame to the grid, never write a cell for a transparent
pixel and raise :py:class:`~term_gif.exceptions.RenderError` for a pixel whose
palette index has no mapped attribute.
"""

from __future__ import annotations

__all__ = ("LOWER_HALF_BLOCK", "render_frame", "render_frame_hires")

from typing import TYPE_CHECKING

from .exceptions import RenderError
from .palette import AttributeTable

if TYPE_CHECKING:
    from .decode import Frame
    from .grid import CellBuffer

LOWER_HALF_BLOCK = "▄"  # lower-half block element


def render_frame(frame: Frame, table: AttributeTable, grid: CellBuffer) -> None:
    """Paints a frame at one pixel per cell.

    Each opaque pixel sets both colors of its cell to the pixel's attribute.
    """
    width = min(grid.width, frame.rect.width)
    height = min(grid.height, frame.rect.height)
    cells = grid.cells
    grid_width = grid.width
    pixels = frame.pixels
    stride = frame.stride

    for y in range(height):
        line_offset = stride * y
        row_offset = grid_width * y
        for x in range(width):
            info = table[pixels[x + line_offset]]
            if info is None:
                raise _unmapped_index(pixels[x + line_offset], x, y)
            if not info.transparent:
                cell = cells[x + row_offset]
                cell.bg = cell.fg = info.attr


def render_frame_hires(frame: Frame, table: AttributeTable, grid: CellBuffer) -> None:
    """Paints a frame at two vertically-stacked pixels per cell.

    Every cell covered by the frame gets the lower-half block glyph. The pixel on
    an even row colors its cell's background (the upper half) and the pixel on
    the following odd row colors its foreground (the lower half).
    """
    width = min(grid.width, frame.rect.width)
    # Two pixel rows per line
    height = min(grid.height * 2, frame.rect.height)
    cells = grid.cells
    grid_width = grid.width
    pixels = frame.pixels
    stride = frame.stride

    for y in range(height):
        line_offset = stride * y
        row_offset = grid_width * (y // 2)
        upper = not y & 1
        for x in range(width):
            info = table[pixels[x + line_offset]]
            if info is None:
                raise _unmapped_index(pixels[x + line_offset], x, y)
            cell = cells[x + row_offset]
            cell.ch = LOWER_HALF_BLOCK
            if not info.transparent:
                if upper:
                    cell.bg = info.attr
                else:
                    cell.fg = info.attr


def _unmapped_index(index: int, x: int, y: int) -> RenderError:
    return RenderError(
        f"Pixel at ({x}, {y}) references palette index {index}, "
        "which is beyond the frame's palette"
    )
