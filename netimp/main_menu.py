"""The main menu."""

from __future__ import annotations

import contextlib
import curses

from .search import search_interface

TITLE = " Youtube but good! "
_POLL_MS = 100
_UP = {curses.KEY_UP, "k"}
_DOWN = {curses.KEY_DOWN, "j"}
_ENTER = {curses.KEY_ENTER, "\n", "\r", "l"}


class MainMenu:
    """Selection state of the main menu."""

    items = ("Search", "Exit")

    def __init__(self) -> None:
        self.selected = 0

    def handle_key(self, key) -> str | None:
        """Apply ``key``; return the name of the chosen item, or None."""
        if key in _UP:
            if self.selected > 0:
                self.selected -= 1
        elif key in _DOWN:
            if self.selected < len(self.items) - 1:
                self.selected += 1
        elif key in _ENTER:
            return self.items[self.selected]
        elif key == "q":
            return "Exit"
        return None

    def lines(self) -> list[tuple[str, bool]]:
        """Return each menu line with whether it is highlighted."""
        return [
            (f"> {item}" if index == self.selected else f"  {item}", index == self.selected)
            for index, item in enumerate(self.items)
        ]


def _highlight() -> int:
    try:
        curses.init_pair(1, curses.COLOR_YELLOW, -1)
        return curses.color_pair(1) | curses.A_BOLD
    except curses.error:
        return curses.A_BOLD


def _draw(screen, title: str, rows: list[list[tuple[str, int]]]) -> None:
    screen.erase()
    height, width = screen.getmaxyx()
    with contextlib.suppress(curses.error):
        screen.border()
        screen.addnstr(0, 2, title, max(width - 4, 0))
    for y, segments in enumerate(rows, start=1):
        if y >= height - 1:
            break
        x = 1
        for text, attr in segments:
            room = width - 1 - x
            if room <= 0:
                break
            with contextlib.suppress(curses.error):
                screen.addnstr(y, x, text, room, attr)
            x += len(text)
    screen.refresh()


def _read_key(screen):
    try:
        return screen.get_wch()
    except curses.error:
        return None


def menu_interface(screen) -> None:
    """Run the main menu until the user leaves it."""
    menu = MainMenu()
    screen.clear()
    while True:
        highlight = _highlight()
        rows = [
            [(text, highlight if chosen else curses.A_NORMAL)]
            for text, chosen in menu.lines()
        ]
        _draw(screen, TITLE, rows)

        screen.timeout(_POLL_MS)
        key = _read_key(screen)
        if key is None:
            continue
        choice = menu.handle_key(key)
        if choice == "Exit":
            return
        if choice == "Search":
            search_interface(screen)