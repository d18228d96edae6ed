"""Downloading videos and audio with yt-dlp."""

from __future__ import annotations

import os
import subprocess
from enum import Enum

_YOUTUBE = "https://www.youtube.com"


class DownloadType(Enum):
    """What to download, with its target directory and yt-dlp format."""

    VIDEO = ("~/Videos/", "best[ext=mp4]/best")
    AUDIO = ("~/Music/", "233")

    @property
    def path(self) -> str:
        return os.path.expanduser(self.value[0])

    @property
    def format(self) -> str:
        return self.value[1]


def normalize_url(url: str) -> str:
    """Turn a full URL, an absolute path or a relative path into a full URL."""
    if url.startswith("http"):
        return url
    if url.startswith("/"):
        return f"{_YOUTUBE}{url}"
    return f"{_YOUTUBE}/{url}"


def download_command(url: str, download_type: DownloadType) -> list[str]:
    """Return the yt-dlp command line that downloads ``url``."""
    return [
        "yt-dlp",
        "-P",
        download_type.path,
        "-f",
        download_type.format,
        normalize_url(url),
    ]


def download_from_yt(url: str, download_type: DownloadType) -> None:
    """Run yt-dlp to download ``url``; raises OSError if it cannot be started."""
    subprocess.run(
        download_command(url, download_type),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    )