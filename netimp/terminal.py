"""Setting up and restoring the terminal."""

from __future__ import annotations

import contextlib
import curses
from collections.abc import Iterator


def init():
    """Put the terminal into raw mode and return the curses screen."""
    screen = curses.initscr()
    try:
        curses.raw()
        curses.noecho()
        screen.keypad(True)
        if curses.has_colors():
            curses.start_color()
            with contextlib.suppress(curses.error):
                curses.use_default_colors()
    except Exception:
        curses.endwin()
        raise
    return screen


def restore(screen) -> None:
    """Leave raw mode, show the cursor and give the terminal back."""
    with contextlib.suppress(curses.error):
        screen.keypad(False)
    with contextlib.suppress(curses.error):
        curses.noraw()
    with contextlib.suppress(curses.error):
        curses.echo()
    with contextlib.suppress(curses.error):
        curses.curs_set(1)
    curses.endwin()


@contextlib.contextmanager
def session() -> Iterator:
    """Yield an initialised screen and always restore the terminal afterwards."""
    screen = init()
    try:
        yield screen
    finally:
        restore(screen)