"""
.. The Color API
"""

from __future__ import annotations

__all__ = ("AttributeInfo", "Color")

from typing_extensions import NamedTuple, Self

from ._utils import arg_value_error_range


# To bypass `NamedTuple`'s `__new__()` override limitation
class _DummyColor(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


class Color(_DummyColor):
    """A color.

    Args:
        r: The red channel.
        g: The green channel.
        b: The blue channel.
        a: The alpha channel (opacity).

    Raises:
        ValueError: The value of a channel is not within the valid range.

    NOTE:
        The valid value range for all channels is 0 to 255, both inclusive.
        See :py:meth:`from_rgba16` for colors with 16-bit channels.

    TIP:
        This class is a :py:class:`~typing.NamedTuple` of four fields.
    """

    __slots__ = ()

    r: int = _DummyColor.r
    r.__doc__ = """The red channel"""

    g: int = _DummyColor.g
    g.__doc__ = """The green channel"""

    b: int = _DummyColor.b
    b.__doc__ = """The blue channel"""

    a: int = _DummyColor.a
    a.__doc__ = """The alpha channel (opacity)"""

    def __new__(cls, r: int, g: int, b: int, a: int = 255) -> Self:
        # `x & ~255` is non-zero if and only if `x` is outside [0, 255]
        if (r | g | b | a) & ~255:  # First test to see if *any* is out of range
            if r & ~255:
                raise arg_value_error_range("r", r)
            if g & ~255:
                raise arg_value_error_range("g", g)
            if b & ~255:
                raise arg_value_error_range("b", b)
            if a & ~255:
                raise arg_value_error_range("a", a)

        # Using `tuple` directly instead of `super()` for performance
        return tuple.__new__(cls, (r, g, b, a))

    @property
    def luma(self) -> int:
        """The perceptual gray level of the color, from 0 to 255.

        Computed with the ITU-R 601 weights on the 16-bit expansion of each
        channel and rounded to 8 bits. The alpha channel is ignored.
        """
        # 0x101 expands an 8-bit value to 16 bits i.e 0xFF -> 0xFFFF
        r, g, b = (x * 0x101 for x in self[:3])
        return (19595 * r + 38470 * g + 7471 * b + 0x8000) >> 24

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Extracts the R, G and B channels of the color.

        Returns:
            A 3-tuple containing the red, green and blue channel values.
        """
        return self[:3]

    @property
    def transparent(self) -> bool:
        """``True`` if the color is fully transparent. Otherwise, ``False``."""
        return self[3] == 0

    @classmethod
    def from_rgba16(cls, r: int, g: int, b: int, a: int = 0xFFFF) -> Self:
        """Creates a new instance from 16-bit channel values.

        Args:
            r: The red channel.
            g: The green channel.
            b: The blue channel.
            a: The alpha channel (opacity).

        Returns:
            A new instance with only the high byte of each channel.

        Raises:
            ValueError: The value of a channel is not within the range 0 to 65535.
        """
        if (r | g | b | a) & ~0xFFFF:
            for name, value in zip("rgba", (r, g, b, a)):
                if value & ~0xFFFF:
                    raise arg_value_error_range(name, value)

        return tuple.__new__(cls, (r >> 8, g >> 8, b >> 8, a >> 8))

    @classmethod
    def _new(cls, r: int, g: int, b: int, a: int = 255) -> Self:
        """Alternate constructor for internal use only."""
        return tuple.__new__(cls, (r, g, b, a))


class AttributeInfo(NamedTuple):
    """A terminal color attribute mapped from a palette entry.

    Args:
        attr: The terminal attribute (``0`` is the terminal's default color).
        transparent: If ``True``, the pixel must not be painted.
    """

    attr: int
    transparent: bool


_Color = Color._new
