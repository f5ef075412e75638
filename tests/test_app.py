import pytest

from tournie.app import App, CurrentScreen, main
from tournie.event import AppEvent, AppMessage, EventHandler, GpioPress, KeyPress, Tick
from tournie.gpio import Button
from tournie.tabs import ExitTab, ReplaysTab, TabWidget


class RecordingTab(TabWidget):
    name = "Record"

    def __init__(self):
        super().__init__()
        self.presses = []
        self.opened = 0
        self.closed = 0

    def open(self):
        super().open()
        self.opened += 1

    def close(self):
        super().close()
        self.closed += 1

    def handle_gpio_event(self, button, events):
        self.presses.append(button)

    def render_lines(self):
        return ["recording"]


class FakeTerm:
    width = 40
    height = 12
    bold = ""
    normal = ""

    def move_xy(self, x, y):
        return ""

    def color_rgb(self, r, g, b):
        return ""

    def on_color_rgb(self, r, g, b):
        return ""


@pytest.fixture
def events():
    handler = EventHandler()
    yield handler
    handler.close()


def make_app(events):
    return App(events, [RecordingTab(), ReplaysTab(), ExitTab()])


def test_default_tabs(events):
    app = App(events)
    assert [tab.name for tab in app.tabs] == ["SD Card", "Replays", "Smashscope", "Exit"]
    assert app.screen is CurrentScreen.MENU
    assert app.tab_index == 0
    assert app.running


def test_next_and_prev_tab_clamp(events):
    app = make_app(events)
    app.prev_tab()
    assert app.tab_index == 0
    for _ in range(5):
        app.next_tab()
    assert app.tab_index == len(app.tabs) - 1
    app.prev_tab()
    assert app.tab_index == len(app.tabs) - 2


@pytest.mark.parametrize("char", ["q", "\x1b", "\x03"])
def test_quit_keys(events, char):
    app = make_app(events)
    app.handle_key_event(KeyPress(char))
    assert events.next(timeout=1) == AppMessage(AppEvent.QUIT)


def test_escape_by_name(events):
    app = make_app(events)
    app.handle_key_event(KeyPress("\x1b", "KEY_ESCAPE"))
    assert events.next(timeout=1) == AppMessage(AppEvent.QUIT)


@pytest.mark.parametrize(
    "char, button",
    [("a", Button.UP), ("s", Button.DOWN), ("d", Button.SELECT), ("f", Button.BACK)],
)
def test_asdf_emulates_buttons(events, char, button):
    app = make_app(events)
    app.handle_key_event(KeyPress(char))
    assert events.next(timeout=1) == GpioPress(button)


def test_other_keys_are_ignored(events):
    app = make_app(events)
    app.handle_key_event(KeyPress("x"))
    with pytest.raises(TimeoutError):
        events.next(timeout=0.05)


def test_menu_navigation_by_buttons(events):
    app = make_app(events)
    app.handle_gpio_event(Button.DOWN)
    app.handle_gpio_event(Button.DOWN)
    assert app.tab_index == 2
    app.handle_gpio_event(Button.UP)
    assert app.tab_index == 1
    app.handle_gpio_event(Button.BACK)
    assert app.screen is CurrentScreen.MENU
    assert app.tab_index == 1


def test_select_opens_and_back_closes(events):
    app = make_app(events)
    tab = app.tabs[0]
    app.handle_gpio_event(Button.SELECT)
    assert app.screen is CurrentScreen.TAB
    assert tab.active and tab.opened == 1
    app.handle_gpio_event(Button.BACK)
    assert app.screen is CurrentScreen.MENU
    assert not tab.active and tab.closed == 1


def test_buttons_in_tab_go_to_tab(events):
    app = make_app(events)
    tab = app.tabs[0]
    app.handle_gpio_event(Button.SELECT)
    app.handle_gpio_event(Button.DOWN)
    app.handle_gpio_event(Button.SELECT)
    assert tab.presses == [Button.DOWN, Button.SELECT]
    assert app.tab_index == 0


def test_exit_tab_confirms_quit(events):
    app = make_app(events)
    app.handle_gpio_event(Button.DOWN)
    app.handle_gpio_event(Button.DOWN)
    app.handle_gpio_event(Button.SELECT)
    app.handle_gpio_event(Button.SELECT)
    assert events.next(timeout=1) == AppMessage(AppEvent.QUIT)
    app.handle_events(timeout=1)
    assert not app.running


def test_exiting_screen_ignores_buttons(events):
    app = make_app(events)
    app.screen = CurrentScreen.EXITING
    app.handle_gpio_event(Button.DOWN)
    app.handle_gpio_event(Button.SELECT)
    assert app.tab_index == 0
    assert not app.tabs[0].active


def test_handle_events_dispatches(events):
    app = make_app(events)
    events.send_gpio(Button.DOWN)
    app.handle_events(timeout=1)
    assert app.tab_index == 1
    events._queue.put(Tick())
    app.handle_events(timeout=1)
    assert app.running
    events._queue.put(KeyPress("q"))
    app.handle_events(timeout=1)
    app.handle_events(timeout=1)
    assert not app.running


def test_handle_events_times_out(events):
    app = make_app(events)
    with pytest.raises(TimeoutError):
        app.handle_events(timeout=0.01)


def test_run_draws_until_quit(events, capsys):
    app = make_app(events)
    events.send(AppEvent.QUIT)
    app.run(FakeTerm())
    assert not app.running
    out = capsys.readouterr().out
    assert " Record " in out
    assert "TT v" in out


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0