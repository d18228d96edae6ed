"""Shared data types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class VideoInfo:
    """A single search result.

    ``tag`` is a short status note shown next to the title, such as the
    progress of a download.
    """

    title: str
    channel: str
    url: str
    tag: str = ""