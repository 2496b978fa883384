"""
.. The Geometry API
"""

from __future__ import annotations

__all__ = ("Rect", "Size")

from typing_extensions import NamedTuple, Self

from ._utils import arg_value_error_range


# To bypass `NamedTuple`'s `__new__()` override limitation
class _DummySize(NamedTuple):
    width: int
    height: int


class Size(_DummySize):
    """The dimensions of a rectangular region.

    Args:
        width: The horizontal dimension
        height: The vertical dimension

    Raises:
        ValueError: Either dimension is negative.

    NOTE:
        A dimension may be zero e.g a terminal with no visible lines.
    """

    __slots__ = ()

    def __new__(cls, width: int, height: int) -> Self:
        if width < 0:
            raise arg_value_error_range("width", width)
        if height < 0:
            raise arg_value_error_range("height", height)

        # Using `tuple` directly instead of `super()` for performance
        return tuple.__new__(cls, (width, height))


Size.width.__doc__ = "The horizontal dimension"
Size.height.__doc__ = "The vertical dimension"


class _DummyRect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class Rect(_DummyRect):
    """A rectangular region of an image.

    Args:
        x: Column of the top-left corner
        y: Row of the top-left corner
        width: The horizontal dimension
        height: The vertical dimension

    Raises:
        ValueError: Either dimension is negative.
    """

    __slots__ = ()

    def __new__(cls, x: int, y: int, width: int, height: int) -> Self:
        if width < 0:
            raise arg_value_error_range("width", width)
        if height < 0:
            raise arg_value_error_range("height", height)

        return tuple.__new__(cls, (x, y, width, height))

    @property
    def size(self) -> Size:
        """The dimensions of the region"""
        return tuple.__new__(Size, self[2:])
