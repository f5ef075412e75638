"""The application state machine and its entry point."""

from __future__ import annotations

import argparse
import sys
from enum import Enum, auto
from typing import Any, Sequence

from tournie.event import AppEvent, AppMessage, EventHandler, GpioPress, KeyPress, Tick
from tournie.gpio import DEFAULT_ROOT, Button
from tournie.tabs import ExitTab, ReplaysTab, SdTab, SmashscopeTab, TabWidget
from tournie.ui import render

_KEY_BUTTONS = {
    "a": Button.UP,
    "s": Button.DOWN,
    "d": Button.SELECT,
    "f": Button.BACK,
}


class CurrentScreen(Enum):
    MENU = auto()
    TAB = auto()
    EXITING = auto()


class App:
    """Menu navigation over a list of tabs, driven by an event queue."""

    def __init__(
        self,
        events: EventHandler | None = None,
        tabs: Sequence[TabWidget] | None = None,
    ):
        self.running = True
        self.screen = CurrentScreen.MENU
        if tabs is None:
            tabs = [SdTab(), ReplaysTab(), SmashscopeTab(), ExitTab()]
        self.tabs: list[TabWidget] = list(tabs)
        self.tab_index = 0
        self.events = events if events is not None else EventHandler()

    @property
    def current_tab(self) -> TabWidget:
        return self.tabs[self.tab_index]

    def run(self, term: Any) -> None:
        """Draw and handle events until the application quits."""
        while self.running:
            sys.stdout.write(render(self, term))
            sys.stdout.flush()
            self.handle_events()

    def handle_events(self, timeout: float | None = None) -> None:
        """Wait for one event and dispatch it."""
        match self.events.next(timeout):
            case Tick():
                self.tick()
            case KeyPress() as key:
                self.handle_key_event(key)
            case GpioPress(button=button):
                self.handle_gpio_event(button)
            case AppMessage(event=AppEvent.QUIT):
                self.quit()

    def handle_key_event(self, key: KeyPress) -> None:
        """Quit on Esc, q or Ctrl-C; the asdf keys stand in for the buttons."""
        if key.name == "KEY_ESCAPE" or key.key in ("\x1b", "q", "\x03"):
            self.events.send(AppEvent.QUIT)
            return
        button = _KEY_BUTTONS.get(key.key)
        if button is not None:
            self.events.send_gpio(button)

    def handle_gpio_event(self, button: Button) -> None:
        """Navigate the menu, or pass the press to the open tab."""
        tab = self.current_tab
        if self.screen is CurrentScreen.MENU:
            if button is Button.UP:
                self.prev_tab()
            elif button is Button.DOWN:
                self.next_tab()
            elif button is Button.SELECT:
                self.screen = CurrentScreen.TAB
                tab.open()
        elif self.screen is CurrentScreen.TAB:
            if button is Button.BACK:
                self.screen = CurrentScreen.MENU
                tab.close()
            else:
                tab.handle_gpio_event(button, self.events)

    def tick(self) -> None:
        """Called at a fixed rate; nothing needs updating yet."""

    def quit(self) -> None:
        self.running = False

    def next_tab(self) -> None:
        if self.tab_index + 1 < len(self.tabs):
            self.tab_index += 1

    def prev_tab(self) -> None:
        if self.tab_index > 0:
            self.tab_index -= 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tournament helper in the terminal."""
    parser = argparse.ArgumentParser(
        prog="tournie", description="Help run melee tournaments from a Raspberry Pi."
    )
    parser.add_argument(
        "--gpio-root",
        default=str(DEFAULT_ROOT),
        help="sysfs GPIO directory (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    import blessed

    term = blessed.Terminal()
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        with EventHandler(terminal=term, gpio=args.gpio_root) as events:
            try:
                App(events).run(term)
            except KeyboardInterrupt:
                pass
    return 0


if __name__ == "__main__":
    sys.exit(main())