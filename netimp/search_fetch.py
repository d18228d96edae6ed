"""Fetching YouTube search results."""

from __future__ import annotations

import json
import re
from typing import Any
from urllib.parse import quote

import requests

from .types import VideoInfo

_INITIAL_DATA = re.compile(r"var ytInitialData = (\{.*?\});</script>")
_MAX_ENTRIES = 13
_CONTENTS_PATH = (
    "contents",
    "twoColumnSearchResultsRenderer",
    "primaryContents",
    "sectionListRenderer",
    "contents",
    0,
    "itemSectionRenderer",
    "contents",
)


class SearchError(Exception):
    """Raised when search results cannot be fetched or read."""


def _dig(value: Any, *path: str | int) -> Any:
    for key in path:
        if isinstance(key, int):
            if not isinstance(value, list) or key >= len(value):
                return None
        elif not isinstance(value, dict) or key not in value:
            return None
        value = value[key]
    return value


def _text(value: Any, *path: str | int) -> str:
    found = _dig(value, *path)
    return found if isinstance(found, str) else ""


def search_url(query: str) -> str:
    """Return the results page URL for ``query``."""
    return f"https://www.youtube.com/results?search_query={quote(query)}"


def parse_search_results(html: str) -> list[VideoInfo]:
    """Extract the videos among the first entries of a results page."""
    match = _INITIAL_DATA.search(html)
    if match is None:
        raise SearchError("ytInitialData not found")
    try:
        data = json.loads(match.group(1))
    except json.JSONDecodeError as error:
        raise SearchError(f"ytInitialData is not valid JSON: {error}") from error

    contents = _dig(data, *_CONTENTS_PATH)
    if not isinstance(contents, list):
        raise SearchError("Content not found")

    videos = []
    for entry in contents[:_MAX_ENTRIES]:
        renderer = entry.get("videoRenderer") if isinstance(entry, dict) else None
        if renderer is None:
            continue
        videos.append(
            VideoInfo(
                title=_text(renderer, "title", "runs", 0, "text"),
                channel=_text(renderer, "ownerText", "runs", 0, "text"),
                url=_text(
                    renderer,
                    "navigationEndpoint",
                    "commandMetadata",
                    "webCommandMetadata",
                    "url",
                ),
            )
        )
    return videos


def fetch_video_titles(query: str) -> list[VideoInfo]:
    """Search YouTube for ``query`` and return the videos found."""
    try:
        response = requests.get(
            search_url(query), headers={"User-Agent": "Mozilla/5.0"}, timeout=30
        )
        html = response.text
    except requests.RequestException as error:
        raise SearchError(f"request failed: {error}") from error
    return parse_search_results(html)