"""The list of search results."""

from __future__ import annotations

import contextlib
import curses
import dataclasses
import threading
from collections.abc import Callable, Iterable

from .download import DownloadType, download_from_yt
from .types import VideoInfo

TITLE = " Youtube but good! (Videos) "
DOWNLOAD_FAILED = "Some error occurred on download."
_POLL_MS = 100
_UP = {curses.KEY_UP, "k"}
_DOWN = {curses.KEY_DOWN, "j"}
_ENTER = {curses.KEY_ENTER, "\n", "\r", "l"}
_LABELS = {
    DownloadType.VIDEO: ("Downloading...", "Downloaded!"),
    DownloadType.AUDIO: ("Downloading audio...", "Audio Downloaded!"),
}


class VideoList:
    """Selection and download state of the result list.

    Downloads run in background threads that update the video's tag.
    """

    def __init__(
        self,
        videos: Iterable[VideoInfo],
        downloader: Callable[[str, DownloadType], None] = download_from_yt,
    ) -> None:
        self.videos = [dataclasses.replace(video) for video in videos]
        self.selected = 0
        self._downloader = downloader
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []

    @property
    def selected_video(self) -> VideoInfo | None:
        """A copy of the highlighted video, or None if the list is empty."""
        if not self.videos:
            return None
        with self._lock:
            return dataclasses.replace(self.videos[self.selected])

    def handle_key(self, key) -> str | None:
        """Apply ``key``; return "quit", "back" or "select" when the list should end."""
        if key == "d":
            self.start_download(DownloadType.VIDEO)
        elif key == "m":
            self.start_download(DownloadType.AUDIO)
        elif key in _UP:
            if self.selected > 0:
                self.selected -= 1
        elif key in _DOWN:
            if self.selected < len(self.videos) - 1:
                self.selected += 1
        elif key == "q":
            return "quit"
        elif key == "h":
            return "back"
        elif key in _ENTER:
            return "select" if self.videos else None
        return None

    def start_download(self, download_type: DownloadType) -> threading.Thread | None:
        """Start downloading the highlighted video in the background."""
        if not self.videos:
            return None
        started, finished = _LABELS[download_type]
        video = self.videos[self.selected]
        with self._lock:
            video.tag = started
            url = video.url
        thread = threading.Thread(
            target=self._download,
            args=(video, url, download_type, finished),
            daemon=True,
        )
        self._threads.append(thread)
        thread.start()
        return thread

    def _download(
        self, video: VideoInfo, url: str, download_type: DownloadType, finished: str
    ) -> None:
        try:
            self._downloader(url, download_type)
        except OSError:
            tag = DOWNLOAD_FAILED
        else:
            tag = finished
        with self._lock:
            video.tag = tag

    def lines(self) -> list[list[tuple[str, str]]]:
        """Return the display lines as (text, style) segments.

        Styles are "selected", "tag" and "normal".
        """
        rows = []
        with self._lock:
            for index, video in enumerate(self.videos):
                if index == self.selected:
                    rows.append([(f"> {video.title}", "selected"), (f" {video.tag}", "tag")])
                    rows.append([(f"  {video.channel}", "selected")])
                else:
                    rows.append([(f"  {video.title}", "normal"), (f" {video.tag}", "tag")])
                    rows.append([(f"  {video.channel}", "normal")])
        return rows

    def wait(self) -> None:
        """Block until every started download has finished."""
        while self._threads:
            self._threads.pop().join()


def _attrs() -> dict[str, int]:
    attrs = {"selected": curses.A_BOLD, "tag": curses.A_NORMAL, "normal": curses.A_NORMAL}
    try:
        curses.init_pair(1, curses.COLOR_YELLOW, -1)
        curses.init_pair(2, curses.COLOR_BLUE, -1)
        attrs["selected"] = curses.color_pair(1) | curses.A_BOLD
        attrs["tag"] = curses.color_pair(2)
    except curses.error:
        pass
    return attrs


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


def videos_interface(screen, videos: Iterable[VideoInfo]) -> VideoInfo | None:
    """Let the user pick a video; return it, or None to go back.

    Quitting from here ends the program.
    """
    view = VideoList(videos)
    screen.clear()
    while True:
        attrs = _attrs()
        rows = [[(text, attrs[style]) for text, style in line] for line in view.lines()]
        _draw(screen, TITLE, rows)

        screen.timeout(_POLL_MS)
        try:
            key = screen.get_wch()
        except curses.error:
            continue
        action = view.handle_key(key)
        if action == "quit":
            raise SystemExit(0)
        if action == "back":
            return None
        if action == "select":
            return view.selected_video