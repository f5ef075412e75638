"""Event types and the queue that gathers them from input threads."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any, Union

from tournie.gpio import Button, GpioHandler

TICK_FPS = 30.0


class AppEvent(Enum):
    """Application-level requests."""

    QUIT = auto()


@dataclass(frozen=True)
class Tick:
    """Emitted at a fixed rate."""


@dataclass(frozen=True)
class KeyPress:
    """A key read from the terminal."""

    key: str
    name: str | None = None


@dataclass(frozen=True)
class AppMessage:
    """An application event queued by the program itself."""

    event: AppEvent


@dataclass(frozen=True)
class GpioPress:
    """A hardware button press."""

    button: Button


Event = Union[Tick, KeyPress, AppMessage, GpioPress]


class EventHandler:
    """Collects ticks, keys, button presses and app events into one queue.

    ``terminal`` is an object with ``inkey(timeout=...)`` (a blessed
    Terminal); ``gpio`` is the sysfs GPIO root. Either may be None to
    leave that source out.
    """

    def __init__(self, terminal: Any = None, gpio: str | Path | None = None):
        self._queue: queue.Queue[Event] = queue.Queue()
        self._stop = threading.Event()
        self._threads: list[threading.Thread] = []
        if terminal is not None:
            self._start(self._terminal_loop, terminal)
        if gpio is not None:
            self._start(self._gpio_loop, GpioHandler(self.send_gpio, gpio))

    def _start(self, target, arg) -> None:
        thread = threading.Thread(target=target, args=(arg,), daemon=True)
        thread.start()
        self._threads.append(thread)

    def _terminal_loop(self, terminal: Any) -> None:
        interval = 1.0 / TICK_FPS
        last_tick = time.monotonic()
        while not self._stop.is_set():
            timeout = max(0.0, interval - (time.monotonic() - last_tick))
            if timeout == 0.0:
                last_tick = time.monotonic()
                self._queue.put(Tick())
            key = terminal.inkey(timeout=timeout)
            if key:
                self._queue.put(KeyPress(str(key), getattr(key, "name", None)))

    def _gpio_loop(self, handler: GpioHandler) -> None:
        try:
            handler.run(self._stop)
        except OSError:
            return

    def next(self, timeout: float | None = None) -> Event:
        """Block until an event arrives; raise TimeoutError if ``timeout`` passes."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no event received") from None

    def send(self, app_event: AppEvent) -> None:
        """Queue an application event."""
        self._queue.put(AppMessage(app_event))

    def send_gpio(self, button: Button) -> None:
        """Queue a button press."""
        self._queue.put(GpioPress(button))

    def close(self) -> None:
        """Stop the input threads."""
        self._stop.set()
        for thread in self._threads:
            thread.join(1.0)

    def __enter__(self) -> EventHandler:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()