import curses
from unittest.mock import MagicMock, patch

import pytest

from netimp.terminal import init, restore, session


def _fake_curses():
    fake = MagicMock()
    fake.error = curses.error
    fake.has_colors.return_value = False
    return fake


def test_init_returns_screen_in_raw_mode():
    fake = _fake_curses()
    with patch("netimp.terminal.curses", fake):
        screen = init()
    assert screen is fake.initscr.return_value
    assert fake.raw.call_count == 1
    assert fake.noecho.call_count == 1
    screen.keypad.assert_called_once_with(True)


def test_init_releases_terminal_when_setup_fails():
    fake = _fake_curses()
    fake.raw.side_effect = curses.error("no tty")
    with patch("netimp.terminal.curses", fake):
        with pytest.raises(curses.error):
            init()
    assert fake.endwin.call_count == 1


def test_restore_shows_cursor_and_ends_window():
    fake = _fake_curses()
    screen = MagicMock()
    with patch("netimp.terminal.curses", fake):
        result = restore(screen)
    assert result is None
    fake.curs_set.assert_called_once_with(1)
    assert fake.noraw.call_count == 1
    assert fake.endwin.call_count == 1


def test_restore_tolerates_cursor_errors():
    fake = _fake_curses()
    fake.curs_set.side_effect = curses.error("unsupported")
    with patch("netimp.terminal.curses", fake):
        result = restore(MagicMock())
    assert result is None
    assert fake.curs_set.call_count == 1
    assert fake.endwin.call_count == 1


def test_session_restores_after_exception():
    fake = _fake_curses()
    with patch("netimp.terminal.curses", fake):
        with pytest.raises(RuntimeError):
            with session() as screen:
                assert screen is fake.initscr.return_value
                raise RuntimeError("boom")
    assert fake.endwin.call_count == 1