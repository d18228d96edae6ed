"""Playing a video in mpv."""

from __future__ import annotations

import contextlib
import curses
import subprocess
import sys
import time

from .download import normalize_url

_STARTUP_WAIT = 3


class PlaybackError(Exception):
    """Raised when the stream URL of a video cannot be resolved."""


def stream_url_command(url: str) -> list[str]:
    """Return the yt-dlp command line that prints the stream URL of ``url``."""
    return ["yt-dlp", "-f", "best[ext=mp4]/best", "-g", normalize_url(url)]


def resolve_stream_url(url: str) -> str:
    """Ask yt-dlp for the direct stream URL of ``url``."""
    result = subprocess.run(
        stream_url_command(url),
        stdin=subprocess.DEVNULL,
        capture_output=True,
        check=False,
    )
    if result.returncode != 0:
        raise PlaybackError(result.stderr.decode("utf-8", errors="replace"))
    return result.stdout.decode("utf-8", errors="replace").strip()


def play_video(screen, url: str) -> None:
    """Show a loading note, then start mpv on the stream of ``url`` in the background."""
    screen.clear()
    screen.addstr(0, 0, " Video Loading...")
    screen.refresh()
    with contextlib.suppress(curses.error):
        curses.curs_set(0)

    try:
        stream_url = resolve_stream_url(url)
    except PlaybackError as error:
        print(f"yt-dlp failed: {error}", file=sys.stderr)
        return

    subprocess.Popen(
        ["mpv", stream_url],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )

    time.sleep(_STARTUP_WAIT)
    screen.clear()
    screen.refresh()