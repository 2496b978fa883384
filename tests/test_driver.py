import pytest
import urwid

from term_gif import driver as driver_module
from term_gif.driver import DEFAULT_TICK_INTERVAL, Driver, EventHandler
from term_gif.terminal import Terminal

from .common import FakeLoop, FakeScreen


class Recorder(EventHandler):
    def __init__(self, quit_after=None):
        self.calls = []
        self.quit_after = quit_after

    def on_init(self, terminal):
        self.calls.append("init")

    def on_tick(self, terminal):
        self.calls.append("tick")
        if self.quit_after is not None and self.calls.count("tick") >= self.quit_after:
            self.quit = True

    def on_event(self, terminal, key):
        self.calls.append(("event", key))
        if key == "q":
            self.quit = True


class FakeMainLoop(FakeLoop):
    """Fires alarms in order until the loop is exited"""

    instances = []

    def __init__(self, widget, screen=None, unhandled_input=None, handle_mouse=True):
        super().__init__()
        self.widget = widget
        self.screen = screen
        self.unhandled_input = unhandled_input
        self.handle_mouse = handle_mouse
        self.keys = []
        type(self).instances.append(self)

    def run(self):
        fired = 0
        try:
            while fired < len(self.alarms):
                _, _, callback = self.alarms[fired]
                fired += 1
                if self.keys:
                    self.unhandled_input(self.keys.pop(0))
                callback(self)
        except urwid.ExitMainLoop:
            pass


@pytest.fixture
def terminal():
    return Terminal(FakeScreen((3, 2)), force=True)


class TestInit:
    def test_default_interval(self, terminal):
        assert Driver(Recorder(), terminal).tick_interval == DEFAULT_TICK_INTERVAL
        assert DEFAULT_TICK_INTERVAL == 0.05

    def test_handler_type(self, terminal):
        with pytest.raises(TypeError):
            Driver(object(), terminal)

    def test_terminal_type(self):
        with pytest.raises(TypeError):
            Driver(Recorder(), FakeScreen())

    def test_interval_type(self, terminal):
        with pytest.raises(TypeError):
            Driver(Recorder(), terminal, "0.05")

    @pytest.mark.parametrize("interval", [0, -0.05])
    def test_interval_value(self, terminal, interval):
        with pytest.raises(ValueError):
            Driver(Recorder(), terminal, interval)


class TestDispatch:
    def test_tick_rearms_first(self, terminal):
        handler = Recorder()
        driver = Driver(handler, terminal, 0.1)
        loop = FakeLoop()
        driver._dispatch_tick(loop)
        assert handler.calls == ["tick"]
        assert len(loop.alarms) == 1
        assert loop.alarms[0][1] == 0.1
        assert loop.removed == []

    def test_tick_quit(self, terminal):
        handler = Recorder(quit_after=1)
        driver = Driver(handler, terminal)
        loop = FakeLoop()
        with pytest.raises(urwid.ExitMainLoop):
            driver._dispatch_tick(loop)
        assert loop.removed == [loop.alarms[0]]
        assert driver._alarm is None

    def test_event(self, terminal):
        handler = Recorder()
        driver = Driver(handler, terminal)
        driver.loop = FakeLoop()
        assert driver._dispatch_event("x") is True
        assert handler.calls == [("event", "x")]

    def test_event_quit(self, terminal):
        handler = Recorder()
        driver = Driver(handler, terminal)
        driver.loop = loop = FakeLoop()
        driver._alarm = loop.set_alarm_in(1, None)
        with pytest.raises(urwid.ExitMainLoop):
            driver._dispatch_event("q")
        assert len(loop.removed) == 1


class TestRun:
    @pytest.fixture(autouse=True)
    def fake_loop(self, monkeypatch):
        FakeMainLoop.instances.clear()
        monkeypatch.setattr(driver_module.urwid, "MainLoop", FakeMainLoop)

    def test_order(self, terminal):
        handler = Recorder(quit_after=3)
        driver = Driver(handler, terminal)
        driver.run()
        assert handler.calls == ["init", "tick", "tick", "tick"]
        assert driver.loop is None

        (loop,) = FakeMainLoop.instances
        assert loop.screen is terminal.screen
        assert loop.handle_mouse is False
        # The first tick is immediate
        assert loop.alarms[0][1] == 0
        assert all(alarm[1] == DEFAULT_TICK_INTERVAL for alarm in loop.alarms[1:])

    def test_quit_key(self, terminal, monkeypatch):
        handler = Recorder()
        original = FakeMainLoop.__init__

        def init(self, *args, **kwargs):
            original(self, *args, **kwargs)
            self.keys = ["a", "q"]

        monkeypatch.setattr(FakeMainLoop, "__init__", init)
        Driver(handler, terminal).run()
        assert handler.calls == ["init", ("event", "a"), "tick", ("event", "q")]

    def test_init_error_propagates(self, terminal):
        class Failing(Recorder):
            def on_init(self, terminal):
                raise RuntimeError("init")

        with pytest.raises(RuntimeError, match="init"):
            Driver(Failing(), terminal).run()
        assert not FakeMainLoop.instances

    def test_tick_error_propagates(self, terminal):
        class Failing(Recorder):
            def on_tick(self, terminal):
                raise RuntimeError("tick")

        driver = Driver(Failing(), terminal)
        with pytest.raises(RuntimeError, match="tick"):
            driver.run()
        assert driver.loop is None
