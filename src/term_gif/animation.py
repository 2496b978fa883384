"""
.. Animation

The playback state of an animated image and the callbacks that play it.
"""

from __future__ import annotations

__all__ = ("Animation",)

import logging as _logging
from typing import FrozenSet, Iterable, Tuple, Union

from ._utils import arg_type_error, arg_value_error_msg
from .colormap import ColorMapper
from .decode import Frame
from .driver import EventHandler
from .exceptions import SetupError
from .palette import build_tables
from .render import render_frame, render_frame_hires
from .terminal import Terminal


class Animation(EventHandler):
    """Loops through the frames of an image, one frame per tick.

    Args:
        frames: The decoded frames.
        mapper: Maps palette colors to terminal attributes.
        hires: If ``True``, frames are rendered at two pixels per cell. Otherwise,
          at one pixel per cell.
        quit_keys: Keys that end the animation.

    Raises:
        TypeError: An argument is of an inappropriate type.
        ValueError: *quit_keys* is empty.

    Attribute tables for all frames are built upon initialization.
    With no frames, ticks paint nothing.
    """

    def __init__(
        self,
        frames: Iterable[Frame],
        mapper: ColorMapper,
        *,
        hires: bool = True,
        quit_keys: Iterable[str] = ("q",),
    ) -> None:
        if not isinstance(mapper, ColorMapper):
            raise arg_type_error("mapper", mapper)
        if not isinstance(hires, bool):
            raise arg_type_error("hires", hires)
        quit_keys = frozenset(quit_keys)
        if not quit_keys:
            raise arg_value_error_msg("At least one quit key is required", quit_keys)

        self._frames: Tuple[Frame, ...] = tuple(frames)
        self._mapper = mapper
        self._hires = hires
        self._quit_keys: FrozenSet[str] = quit_keys
        self._tables = build_tables(self._frames, mapper)

        self.frame_number = 0
        self.ticks = 0
        self.quit = False

    frames = property(lambda self: self._frames, doc="The frames, in order")

    hires = property(
        lambda self: self._hires, doc="``True`` if rendering at two pixels per cell"
    )

    mapper = property(lambda self: self._mapper, doc="The color mapper")

    n_frames = property(lambda self: len(self._frames), doc="Number of frames")

    tables = property(
        lambda self: self._tables,
        doc="The attribute table of each frame, in the same order as the frames",
    )

    def advance(self) -> int:
        """Moves to the next frame, wrapping around after the last.

        Returns:
            The new frame number.
        """
        self.ticks += 1
        if self._frames:
            self.frame_number = self.ticks % len(self._frames)

        return self.frame_number

    def on_init(self, terminal: Terminal) -> None:
        """Sets the output mode required by the color mapper.

        Raises:
            term_gif.exceptions.SetupError: The output mode could not be set.
        """
        required = self._mapper.output_mode
        mode = terminal.set_output_mode(required)
        if mode is not required:
            raise SetupError(
                f"Failed to set output mode {required.name} (got: {mode.name})"
            )
        _logger.debug(
            f"Playing {len(self._frames)} frame(s) "
            f"({'hi-res' if self._hires else 'standard'}, {self._mapper.name})"
        )

    def on_tick(self, terminal: Terminal) -> None:
        """Paints the current frame on a blank buffer, then advances."""
        grid = terminal.cells()
        # Transparent pixels show the default colors, not a previous frame
        grid.clear()
        if self._frames:
            n = self.frame_number
            render = render_frame_hires if self._hires else render_frame
            render(self._frames[n], self._tables[n], grid)
        self.advance()

    def on_event(self, terminal: Terminal, key: Union[str, tuple]) -> None:
        """Sets :py:attr:`quit` if *key* is a quit key."""
        if isinstance(key, str) and key in self._quit_keys:
            _logger.info(f"Quit key {key!r} pressed")
            self.quit = True


_logger = _logging.getLogger(__name__)
