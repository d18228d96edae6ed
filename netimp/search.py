"""The search prompt."""

from __future__ import annotations

import contextlib
import curses

from .play_video import play_video
from .search_fetch import fetch_video_titles
from .videos import videos_interface

TITLE = " Youtube but good! "
_BACKSPACE = {curses.KEY_BACKSPACE, "\x7f", "\b"}
_ENTER = {curses.KEY_ENTER, "\n", "\r"}
_ESCAPE = "\x1b"


class SearchInput:
    """The text typed into the search prompt."""

    def __init__(self) -> None:
        self.text = ""

    def handle_key(self, key) -> str | None:
        """Apply ``key``; return "cancel" or "submit" when the prompt ends."""
        if key == _ESCAPE:
            return "cancel"
        if key in _ENTER:
            return "submit"
        if key in _BACKSPACE:
            self.text = self.text[:-1]
        elif isinstance(key, str) and key.isprintable():
            self.text += key
        return None

    def line(self) -> str:
        """Return the prompt line as shown."""
        return f" Search: {self.text}"


def _draw(screen, title: str, line: str) -> None:
    screen.erase()
    height, width = screen.getmaxyx()
    with contextlib.suppress(curses.error):
        screen.border()
        screen.addnstr(0, 2, title, max(width - 4, 0))
        if height > 2 and width > 2:
            screen.addnstr(1, 1, line, width - 2)
    screen.refresh()


def search_interface(screen) -> None:
    """Ask for a query, list the results and play the video chosen."""
    prompt = SearchInput()
    screen.clear()
    screen.timeout(-1)
    while True:
        _draw(screen, TITLE, prompt.line())
        try:
            key = screen.get_wch()
        except curses.error:
            continue
        action = prompt.handle_key(key)
        if action == "cancel":
            return
        if action == "submit":
            break

    chosen = videos_interface(screen, fetch_video_titles(prompt.text))
    if chosen is not None:
        play_video(screen, chosen.url)