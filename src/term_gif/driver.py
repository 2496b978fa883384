"""
.. The Animation Driver

Runs the tick/event loop on top of :py:class:`urwid.MainLoop`.
"""

from __future__ import annotations

__all__ = ("DEFAULT_TICK_INTERVAL", "Driver", "EventHandler")

import logging as _logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

import urwid

from ._utils import arg_type_error, arg_value_error_range
from .terminal import CellGrid, Terminal

#: Seconds between ticks
DEFAULT_TICK_INTERVAL = 0.05


class EventHandler(ABC):
    """The callbacks invoked by a :py:class:`Driver`.

    Callbacks run one at a time, never concurrently, and any exception raised by
    one ends the loop.
    """

    #: When set, the driver leaves its loop after the current callback returns
    quit: bool = False

    @abstractmethod
    def on_init(self, terminal: Terminal) -> None:
        """Invoked once, before the first tick."""
        raise NotImplementedError

    @abstractmethod
    def on_tick(self, terminal: Terminal) -> None:
        """Invoked at every tick."""
        raise NotImplementedError

    @abstractmethod
    def on_event(self, terminal: Terminal, key: Union[str, tuple]) -> None:
        """Invoked for every input event, as delivered by urwid."""
        raise NotImplementedError


class Driver:
    """Drives an :py:class:`EventHandler` at a fixed tick interval.

    Args:
        handler: The callbacks.
        terminal: The terminal passed to every callback and drawn on.
        tick_interval: Seconds between ticks.

    Raises:
        TypeError: An argument is of an inappropriate type.
        ValueError: *tick_interval* is not greater than zero.
    """

    def __init__(
        self,
        handler: EventHandler,
        terminal: Terminal,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        if not isinstance(handler, EventHandler):
            raise arg_type_error("handler", handler)
        if not isinstance(terminal, Terminal):
            raise arg_type_error("terminal", terminal)
        if not isinstance(tick_interval, (int, float)):
            raise arg_type_error("tick_interval", tick_interval)
        if tick_interval <= 0:
            raise arg_value_error_range("tick_interval", tick_interval)

        self._handler = handler
        self._terminal = terminal
        self._tick_interval = tick_interval
        self._widget = CellGrid(terminal)
        self._alarm: Optional[Any] = None
        self.loop: Optional[urwid.MainLoop] = None

    tick_interval = property(
        lambda self: self._tick_interval, doc="Seconds between ticks"
    )

    def run(self) -> None:
        """Runs the init callback, then the loop until the handler quits.

        Propagates any exception raised by a callback, e.g
        :py:class:`~term_gif.exceptions.SetupError` from the init callback.
        """
        self._handler.on_init(self._terminal)

        self.loop = urwid.MainLoop(
            self._widget,
            screen=self._terminal.screen,
            unhandled_input=self._dispatch_event,
            handle_mouse=False,
        )
        self._alarm = self.loop.set_alarm_in(0, self._dispatch_tick)

        _logger.info(f"Starting loop (tick interval: {self._tick_interval}s)")
        try:
            self.loop.run()
        finally:
            self._alarm = None
            self.loop = None
        _logger.info("Loop ended")

    def _check_quit(self, loop: urwid.MainLoop) -> None:
        if self._handler.quit:
            if self._alarm is not None:
                loop.remove_alarm(self._alarm)
                self._alarm = None
            raise urwid.ExitMainLoop()

    def _dispatch_event(self, key: Union[str, tuple]) -> bool:
        self._handler.on_event(self._terminal, key)
        self._check_quit(self.loop)

        return True

    def _dispatch_tick(self, loop: urwid.MainLoop, user_data: Any = None) -> None:
        # Re-armed first, to keep to the interval regardless of render time
        self._alarm = loop.set_alarm_in(self._tick_interval, self._dispatch_tick)
        self._handler.on_tick(self._terminal)
        self._widget._invalidate()
        self._check_quit(loop)


_logger = _logging.getLogger(__name__)
