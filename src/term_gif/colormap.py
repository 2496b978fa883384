"""
.. Color Mappers

Strategies mapping palette colors onto the discrete attribute set of a terminal.
"""

from __future__ import annotations

__all__ = (
    "CUBE_BASE",
    "MAPPERS",
    "ColorMapper",
    "GrayscaleMapper",
    "RGBCubeMapper",
    "get_mapper",
)

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Type

from ._utils import arg_value_error_msg
from .color import AttributeInfo, Color
from .terminal import OutputMode

# Attribute of the first color of the 6x6x6 cube in 256-color output mode
CUBE_BASE = 17

# Width of each luma bucket of the grayscale ramp
GRAY_STEP = 11


class ColorMapper(ABC):
    """Maps a color to a terminal attribute.

    Instances are callables taking a :py:class:`~term_gif.color.Color` and
    returning an :py:class:`~term_gif.color.AttributeInfo`.

    Only a fully transparent color (alpha of zero) is reported as transparent.
    Any other alpha value is treated as fully opaque.
    """

    #: Name by which the mapper is selected
    name: ClassVar[str]

    #: The terminal output mode the attributes are meant for
    output_mode: ClassVar[OutputMode]

    def __call__(self, color: Color) -> AttributeInfo:
        return AttributeInfo(self._map(color), color[3] == 0)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.name}>"

    @abstractmethod
    def _map(self, color: Color) -> int:
        """Returns the attribute for the color's R, G and B channels."""
        raise NotImplementedError


class GrayscaleMapper(ColorMapper):
    """Maps colors onto the 24-step grayscale ramp (attributes 1 to 24)."""

    name = "gray"
    output_mode = OutputMode.GRAYSCALE

    def _map(self, color: Color) -> int:
        return color.luma // GRAY_STEP + 1


class RGBCubeMapper(ColorMapper):
    """Maps colors onto the 6x6x6 color cube (attributes 17 to 232)."""

    name = "rgb"
    output_mode = OutputMode.COLORS_256

    def _map(self, color: Color) -> int:
        r, g, b, _ = color
        return (r * 6 // 256) * 36 + (g * 6 // 256) * 6 + (b * 6 // 256) + CUBE_BASE


def get_mapper(name: str) -> ColorMapper:
    """Returns a new mapper instance.

    Args:
        name: The mapper's name, one of the keys of :py:data:`MAPPERS`.

    Raises:
        ValueError: Unknown mapper name.
    """
    try:
        return MAPPERS[name]()
    except KeyError:
        raise arg_value_error_msg("Unknown color map", name) from None


MAPPERS: Dict[str, Type[ColorMapper]] = {
    mapper.name: mapper for mapper in (RGBCubeMapper, GrayscaleMapper)
}
