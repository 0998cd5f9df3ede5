"""Shared fixtures for videorepo tests."""

import httpx
import pytest

from videorepo.http import FeedFetcher
from videorepo.session import MemorySessionStore


def make_feed(count: int, **overrides: str) -> bytes:
    """Build a videos.xml document with `count` videos."""
    videos = []
    for i in range(1, count + 1):
        fields = {
            "id": str(1000 + i),
            "title": f"Video {i}",
            "description": f"Description {i}",
            "url": f"https://vimeo.com/{1000 + i}",
            "thumbnail_small": f"https://i.vimeocdn.com/video/{1000 + i}_100x75.jpg",
            "thumbnail_large": f"https://i.vimeocdn.com/video/{1000 + i}_640.jpg",
        }
        fields.update(overrides)
        body = "".join(f"<{tag}>{value}</{tag}>" for tag, value in fields.items())
        videos.append(f"<video>{body}</video>")
    return f'<?xml version="1.0" encoding="UTF-8"?><videos>{"".join(videos)}</videos>'.encode()


class FeedServer:
    """Serves canned feeds through an httpx.MockTransport and counts requests."""

    def __init__(self):
        self.feeds: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        content = self.feeds.get(request.url.path)
        if content is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, content=content, headers={"Content-Type": "application/xml"})

    def add(self, user: str, content: bytes) -> None:
        self.feeds[f"/api/v2/{user}/videos.xml"] = content


@pytest.fixture
def feed_server():
    """A fake Vimeo API."""
    return FeedServer()


@pytest.fixture
def fetcher(feed_server):
    """A fetcher wired to the fake Vimeo API."""
    fetcher = FeedFetcher(transport=httpx.MockTransport(feed_server.handler))
    yield fetcher
    fetcher.close()


@pytest.fixture
def session_store():
    """A fresh in-memory session store."""
    with MemorySessionStore() as store:
        yield store
