"""HTTP fetching with a short-lived response cache."""

import logging
import threading
import time

import httpx

from videorepo.sources.base import FetchError

logger = logging.getLogger(__name__)

# Seconds before a network request is abandoned
FETCH_TIMEOUT = 30.0

# Seconds a cached response stays fresh
DEFAULT_CACHE_TTL = 120

# Most responses held at once; the oldest is dropped first
DEFAULT_CACHE_SIZE = 64

DEFAULT_USER_AGENT = "videorepo/0.1 (file picker)"


class FeedFetcher:
    """GETs feed documents, reusing recent responses for identical URLs.

    Example:
        with FeedFetcher() as fetcher:
            content = fetcher.get("http://vimeo.com/api/v2/staff/videos.xml")
    """

    def __init__(
        self,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        cache_size: int = DEFAULT_CACHE_SIZE,
        timeout: float = FETCH_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize fetcher.

        Args:
            cache_ttl: Seconds to keep responses. 0 disables caching.
            cache_size: Most responses kept at once.
            timeout: Request timeout in seconds.
            user_agent: User-Agent header sent with every request.
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self.cache_ttl = cache_ttl
        self.cache_size = cache_size
        self._client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
            transport=transport,
        )
        self._cache: dict[str, tuple[float, bytes]] = {}
        self._lock = threading.Lock()

    def get(self, url: str) -> bytes:
        """Fetch a URL and return the response body.

        Raises:
            FetchError: On network failure, timeout or a non-2xx response.
        """
        cached = self._cache.get(url)
        if cached is not None:
            fetched_at, content = cached
            if time.monotonic() - fetched_at < self.cache_ttl:
                logger.debug(f"Cache hit: {url}")
                return content
            self._cache.pop(url, None)

        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch {url}: {e}") from e

        content = response.content
        if self.cache_ttl > 0 and self.cache_size > 0:
            self._store(url, content)
        return content

    def _store(self, url: str, content: bytes) -> None:
        with self._lock:
            now = time.monotonic()
            for key, (fetched_at, _) in list(self._cache.items()):
                if now - fetched_at >= self.cache_ttl:
                    self._cache.pop(key, None)

            # Insertion order is age order
            while len(self._cache) >= self.cache_size:
                self._cache.pop(next(iter(self._cache)), None)

            self._cache[url] = (now, content)

    @property
    def cached_urls(self) -> list[str]:
        return list(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FeedFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
