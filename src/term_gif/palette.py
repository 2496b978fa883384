"""
.. Palette Tables

Per-frame lookup tables from palette index to terminal attribute.
"""

from __future__ import annotations

__all__ = ("PALETTE_SIZE", "AttributeTable", "build_table", "build_tables")

import logging as _logging
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Sequence

from .color import AttributeInfo, Color

if TYPE_CHECKING:
    from .decode import Frame

# Largest palette an indexed-color frame may carry
PALETTE_SIZE = 256

AttributeTable = List[Optional[AttributeInfo]]


def build_table(
    palette: Sequence[Color], mapper: Callable[[Color], AttributeInfo]
) -> AttributeTable:
    """Maps every entry of a palette.

    Returns:
        A list of :py:data:`PALETTE_SIZE` entries. Entry ``i`` is the mapped
        attribute of ``palette[i]``; entries beyond the palette are ``None``.

    Only the first :py:data:`PALETTE_SIZE` entries of a larger palette are mapped.
    """
    if len(palette) > PALETTE_SIZE:
        _logger.warning(
            f"Palette has {len(palette)} entries; only the first {PALETTE_SIZE} "
            "are used"
        )
        palette = palette[:PALETTE_SIZE]

    table: AttributeTable = [None] * PALETTE_SIZE
    table[: len(palette)] = map(mapper, palette)

    return table


def build_tables(
    frames: Iterable[Frame], mapper: Callable[[Color], AttributeInfo]
) -> List[AttributeTable]:
    """Returns the attribute table of each frame, in the same order."""
    tables = [build_table(frame.palette, mapper) for frame in frames]
    _logger.debug(f"Built {len(tables)} attribute table(s) with {mapper!r}")

    return tables


_logger = _logging.getLogger(__name__)
