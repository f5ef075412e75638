"""Drawing the menu, the tab body and the footer onto a blessed terminal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tournie.tabs import NEUTRAL, SLATE, TabWidget

VERSION = "0.1.0"
TITLE_WIDTH = 10
CONTENT_HEIGHT = 8
FOOTER_TEXT = "   left   |    right    |    OK     |   back   "

_FULL = "\u2588"
_UPPER_HALF = "\u2580"
_LOWER_HALF = "\u2584"


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the screen, in character cells."""

    x: int
    y: int
    width: int
    height: int

    def inner(self, horizontal: int, vertical: int) -> Rect:
        """Shrink by a margin on each side; an empty rect if it does not fit."""
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect(0, 0, 0, 0)
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )


def centered_rect(area: Rect, size: int) -> Rect:
    """A full-width band ``size`` rows tall, centred vertically in ``area``."""
    height = min(size, area.height)
    return Rect(area.x, area.y + (area.height - height) // 2, area.width, height)


def tab_title(tab: TabWidget) -> str:
    """The label of a tab in the header."""
    return f" {tab.name} "


def tab_border_color(tab: TabWidget) -> str:
    """The border colour: the tab's own colour while it is open."""
    return tab.color.c700 if tab.active else NEUTRAL.c500


def _rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


class _Canvas:
    """Collects positioned, styled writes clipped to the screen."""

    def __init__(self, term: Any):
        self.term = term
        self.width = term.width
        self.height = term.height
        self.parts: list[str] = []

    def put(
        self,
        x: int,
        y: int,
        text: str,
        *,
        fg: str | None = None,
        bg: str | None = None,
        bold: bool = False,
        limit: int | None = None,
    ) -> None:
        if not 0 <= y < self.height or not 0 <= x < self.width:
            return
        right = self.width if limit is None else min(self.width, limit)
        text = text[: max(0, right - x)]
        if not text:
            return
        term = self.term
        style = ""
        if fg is not None:
            style += str(term.color_rgb(*_rgb(fg)))
        if bg is not None:
            style += str(term.on_color_rgb(*_rgb(bg)))
        if bold:
            style += str(term.bold)
        self.parts.append(f"{term.move_xy(x, y)}{style}{text}{term.normal}")

    def output(self) -> str:
        return "".join(self.parts)


def _render_tab_headers(canvas: _Canvas, app: Any, width: int) -> None:
    current = app.tabs[app.tab_index]
    x = 0
    for index, tab in enumerate(app.tabs):
        if index:
            x += 1
        title = tab_title(tab)
        background = current.color.c700 if index == app.tab_index else NEUTRAL.c700
        canvas.put(x, 0, title, fg=SLATE.c200, bg=background, limit=width)
        x += len(title)


def _render_block(canvas: _Canvas, tab: TabWidget, area: Rect) -> None:
    if area.width < 2 or area.height < 2:
        return
    color = tab_border_color(tab)
    background = SLATE.c950
    middle = area.width - 2
    canvas.put(area.x, area.y, _FULL + _UPPER_HALF * middle + _FULL, fg=color, bg=background)
    for y in range(area.y + 1, area.y + area.height - 1):
        canvas.put(area.x, y, _FULL, fg=color, bg=background)
        canvas.put(area.x + area.width - 1, y, _FULL, fg=color, bg=background)
    bottom = area.y + area.height - 1
    canvas.put(area.x, bottom, _FULL + _LOWER_HALF * middle + _FULL, fg=color, bg=background)


def _render_tab_body(canvas: _Canvas, tab: TabWidget, area: Rect) -> None:
    band = centered_rect(area, CONTENT_HEIGHT)
    right = band.x + band.width
    for row, line in enumerate(tab.render_lines()[: band.height]):
        text = line[: band.width]
        if not text:
            continue
        x = band.x + (band.width - len(text)) // 2
        canvas.put(x, band.y + row, text, fg=SLATE.c200, bg=SLATE.c950, limit=right)


def render(app: Any, term: Any) -> str:
    """Return one full frame of the application as terminal output."""
    canvas = _Canvas(term)
    width, height = canvas.width, canvas.height
    background = SLATE.c950

    for y in range(height):
        canvas.put(0, y, " " * width, bg=background)

    title_width = min(TITLE_WIDTH, width)
    _render_tab_headers(canvas, app, width - title_width)
    title = f"TT v{VERSION}"[:title_width]
    canvas.put(width - len(title), 0, title, fg=SLATE.c200, bg=background, bold=True)

    if height >= 2:
        footer_y = height - 1
        text = FOOTER_TEXT[:width]
        line = " " * ((width - len(text)) // 2) + text
        line += " " * (width - len(line))
        canvas.put(0, footer_y, line, fg=SLATE.c200, bg=NEUTRAL.c900)

        body = Rect(0, 1, width, height - 2)
        tab = app.tabs[app.tab_index]
        _render_block(canvas, tab, body)
        _render_tab_body(canvas, tab, body.inner(1, 1))

    return canvas.output()