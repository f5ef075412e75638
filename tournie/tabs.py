"""The tabs shown in the menu and what each one does."""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from tournie.disk import SDHandler
from tournie.event import AppEvent
from tournie.gpio import Button


@dataclass(frozen=True)
class Palette:
    """A colour ramp as hex strings."""

    c200: str
    c500: str
    c700: str
    c900: str
    c950: str


GREEN = Palette("#bbf7d0", "#22c55e", "#15803d", "#14532d", "#052e16")
FUCHSIA = Palette("#f5d0fe", "#d946ef", "#a21caf", "#701a75", "#4a044e")
INDIGO = Palette("#c7d2fe", "#6366f1", "#4338ca", "#312e81", "#1e1b4b")
RED = Palette("#fecaca", "#ef4444", "#b91c1c", "#7f1d1d", "#450a0a")
SLATE = Palette("#e2e8f0", "#64748b", "#334155", "#0f172a", "#020617")
NEUTRAL = Palette("#e5e5e5", "#737373", "#404040", "#171717", "#0a0a0a")


class TabWidget(ABC):
    """A menu tab that can be opened, closed and drawn."""

    name: ClassVar[str] = ""
    color: ClassVar[Palette] = NEUTRAL

    def __init__(self) -> None:
        self.active = False

    def __repr__(self) -> str:
        return f"TabWidget{{{self.name}}}"

    def open(self) -> None:
        self.active = True

    def close(self) -> None:
        self.active = False

    def handle_gpio_event(self, button: Button, events: Any) -> None:
        """React to a button press while the tab is open."""

    @abstractmethod
    def render_lines(self) -> list[str]:
        """Lines of text to show, centred, in the tab body."""


class SdTab(TabWidget):
    name = "SD Card"
    color = GREEN
    media_root: ClassVar[str] = "/media"

    def __init__(self) -> None:
        super().__init__()
        self.sd_card: SDHandler | None = None
        self.version: str | None = None

    def open(self) -> None:
        if self.active:
            return
        self.active = True
        self.sd_card = SDHandler.find_sd(self.media_root)
        self.version = self.sd_card.slippi_version() if self.sd_card else None

    def close(self) -> None:
        self.active = False
        self.sd_card = None

    def render_lines(self) -> list[str]:
        if not self.active:
            return []
        if self.sd_card is None:
            return ["No SD Card!"]
        if self.version is not None:
            return ["Found SD Card!", f"Slippi Version: {self.version}"]
        return ["Found SD Card!", "No Slippi Nintendont Installation!"]


class ReplaysTab(TabWidget):
    name = "Replays"
    color = FUCHSIA

    def render_lines(self) -> list[str]:
        return []


class SmashscopeTab(TabWidget):
    name = "Smashscope"
    color = INDIGO
    command: ClassVar[tuple[str, ...]] = ("dolphin-emu", "-b", "-e", "boot.dol")

    def __init__(self) -> None:
        super().__init__()
        self.dolphin: subprocess.Popen | None = None

    def open(self) -> None:
        if self.active:
            return
        self.active = True
        try:
            self.dolphin = subprocess.Popen(
                list(self.command),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            pass

    def close(self) -> None:
        self.active = False
        process, self.dolphin = self.dolphin, None
        if process is not None:
            try:
                process.kill()
                process.wait()
            except OSError:
                pass

    def render_lines(self) -> list[str]:
        lines = ["Press [OK] to launch Dolphin"]
        if self.active:
            lines += ["", "Launching Dolphin...", "Press [BACK] to quit"]
        return lines


class ExitTab(TabWidget):
    name = "Exit"
    color = RED

    def handle_gpio_event(self, button: Button, events: Any) -> None:
        if button is Button.SELECT:
            events.send(AppEvent.QUIT)

    def render_lines(self) -> list[str]:
        lines = ["Press [OK] to exit"]
        if self.active:
            lines.append("Press [OK] again to confirm")
        return lines