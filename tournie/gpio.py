"""Push-button input read from the Linux sysfs GPIO interface."""

from __future__ import annotations

import threading
import time
from collections import deque
from enum import IntEnum
from pathlib import Path
from typing import Callable

DEFAULT_ROOT = Path("/sys/class/gpio")
DEBOUNCE = 0.05
POLL_INTERVAL = 0.01


class Button(IntEnum):
    """Physical buttons, valued by the BCM pin they are wired to."""

    UP = 17
    DOWN = 22
    SELECT = 23
    BACK = 27


def button_from_pin(n: int) -> Button:
    """Return the button on pin ``n``; unknown pins map to BACK."""
    try:
        return Button(n)
    except ValueError:
        return Button.BACK


class GpioHandler:
    """Watches the button pins and reports falling edges to ``sender``.

    The pins are pulled up, so a press pulls the level from 1 to 0.
    """

    def __init__(self, sender: Callable[[Button], object], root: str | Path = DEFAULT_ROOT):
        self.sender = sender
        self.root = Path(root)
        self.debounce = DEBOUNCE
        self._levels = {button: 1 for button in Button}
        self._last_edge: dict[Button, float] = {}
        self._pending: deque[Button] = deque()

    def _pin_dir(self, button: Button) -> Path:
        return self.root / f"gpio{button.value}"

    def setup(self) -> None:
        """Export every button pin and configure it as an input."""
        for button in Button:
            pin_dir = self._pin_dir(button)
            if not pin_dir.exists():
                (self.root / "export").write_text(str(button.value))
            (pin_dir / "direction").write_text("in")

    def _read_level(self, button: Button) -> int | None:
        try:
            text = (self._pin_dir(button) / "value").read_text().strip()
        except OSError:
            return None
        return 0 if text == "0" else 1

    def poll_once(self) -> Button | None:
        """Sample all pins once; send and return one pressed button, if any."""
        now = time.monotonic()
        for button in Button:
            level = self._read_level(button)
            if level is None:
                continue
            previous = self._levels[button]
            self._levels[button] = level
            if previous == 1 and level == 0:
                last = self._last_edge.get(button)
                if last is None or now - last >= self.debounce:
                    self._last_edge[button] = now
                    self._pending.append(button)
        if not self._pending:
            return None
        button = self._pending.popleft()
        self.sender(button)
        return button

    def run(self, stop: threading.Event) -> None:
        """Set the pins up and poll them until ``stop`` is set."""
        self.setup()
        while not stop.is_set():
            self.poll_once()
            stop.wait(POLL_INTERVAL)