import curses
import threading

import pytest

from netimp.download import DownloadType
from netimp.types import VideoInfo
from netimp.videos import DOWNLOAD_FAILED, VideoList, videos_interface


class FakeScreen:
    def __init__(self, keys):
        self.keys = list(keys)
        self.drawn = []

    def erase(self):
        pass

    def clear(self):
        pass

    def refresh(self):
        pass

    def border(self):
        pass

    def timeout(self, ms):
        pass

    def getmaxyx(self):
        return (24, 80)

    def addnstr(self, y, x, text, n, attr=0):
        self.drawn.append(text)

    def get_wch(self):
        if not self.keys:
            raise RuntimeError("no more keys")
        return self.keys.pop(0)


def sample_videos():
    return [
        VideoInfo(title="First", channel="Alpha", url="/watch?v=one"),
        VideoInfo(title="Second", channel="Beta", url="/watch?v=two"),
    ]


def recording_downloader(calls, error=None):
    def downloader(url, download_type):
        calls.append((url, download_type))
        if error is not None:
            raise error

    return downloader


def test_lines_mark_selected():
    view = VideoList(sample_videos())
    assert view.lines() == [
        [("> First", "selected"), (" ", "tag")],
        [("  Alpha", "selected")],
        [("  Second", "normal"), (" ", "tag")],
        [("  Beta", "normal")],
    ]


def test_navigation_bounds():
    view = VideoList(sample_videos())
    view.handle_key("k")
    assert view.selected == 0
    view.handle_key(curses.KEY_DOWN)
    view.handle_key("j")
    assert view.selected == 1
    view.handle_key(curses.KEY_UP)
    assert view.selected == 0


@pytest.mark.parametrize("key,action", [("q", "quit"), ("h", "back"), ("\n", "select"), ("l", "select")])
def test_ending_keys(key, action):
    assert VideoList(sample_videos()).handle_key(key) == action


def test_select_on_empty_list_does_nothing():
    view = VideoList([])
    assert view.handle_key("\n") is None
    assert view.selected_video is None


def test_selected_video_is_a_copy():
    view = VideoList(sample_videos())
    view.handle_key("j")
    chosen = view.selected_video
    assert chosen.title == "Second"
    chosen.tag = "changed"
    assert view.videos[1].tag == ""


def test_video_download_sets_tags():
    calls = []
    originals = sample_videos()
    view = VideoList(originals, downloader=recording_downloader(calls))
    view.handle_key("d")
    view.wait()
    assert calls == [("/watch?v=one", DownloadType.VIDEO)]
    assert view.videos[0].tag == "Downloaded!"
    assert originals[0].tag == ""


def test_audio_download_sets_tags():
    calls = []
    view = VideoList(sample_videos(), downloader=recording_downloader(calls))
    view.handle_key("j")
    view.handle_key("m")
    view.wait()
    assert calls == [("/watch?v=two", DownloadType.AUDIO)]
    assert view.videos[1].tag == "Audio Downloaded!"


def test_failed_download_reports_error():
    view = VideoList(sample_videos(), downloader=recording_downloader([], OSError("missing")))
    view.start_download(DownloadType.VIDEO)
    view.wait()
    assert view.videos[0].tag == DOWNLOAD_FAILED


def test_tag_shows_progress_while_running():
    release = threading.Event()

    def downloader(url, download_type):
        release.wait(5)

    view = VideoList(sample_videos(), downloader=downloader)
    view.start_download(DownloadType.AUDIO)
    assert view.videos[0].tag == "Downloading audio..."
    assert view.lines()[0][1] == (" Downloading audio...", "tag")
    release.set()
    view.wait()
    assert view.videos[0].tag == "Audio Downloaded!"


def test_videos_interface_returns_chosen():
    screen = FakeScreen(["j", "\n"])
    chosen = videos_interface(screen, sample_videos())
    assert chosen == VideoInfo(title="Second", channel="Beta", url="/watch?v=two")
    assert " Youtube but good! (Videos) " in screen.drawn


def test_videos_interface_back_returns_none():
    assert videos_interface(FakeScreen(["h"]), sample_videos()) is None


def test_videos_interface_quit_exits():
    with pytest.raises(SystemExit) as info:
        videos_interface(FakeScreen(["q"]), sample_videos())
    assert info.value.code == 0