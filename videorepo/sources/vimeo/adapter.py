"""Vimeo repository using the simple (v2) API.

Lists the public videos of a Vimeo user or channel. No API key is
needed; the feed is public XML:

    http://vimeo.com/api/v2/<user>/videos.xml
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from videorepo.http import FeedFetcher
from videorepo.listing import build_listing
from videorepo.models import (
    PAGE_SIZE,
    ListingEntry,
    ListingResponse,
    PageResult,
    SearchQuery,
    SortOrder,
    VideoRecord,
)
from videorepo.session.base import SessionStore
from videorepo.session.keywords import resolve_keyword
from videorepo.sources.base import ParseError, RepositoryPlugin, ReturnType
from videorepo.strings import get_string

logger = logging.getLogger(__name__)

API_ENDPOINT = "http://vimeo.com/api/v2/"
FEED_SUFFIX = "/videos.xml"


def feed_url(keyword: str) -> str:
    """Build the videos feed URL for a user or channel name."""
    return f"{API_ENDPOINT}{quote(keyword, safe='')}{FEED_SUFFIX}"


def parse_videos(content: bytes) -> list[VideoRecord]:
    """Parse a videos.xml document into records, in feed order.

    Raises:
        ParseError: If the body is not XML or not a <videos> collection.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"Feed is not valid XML: {e}") from e

    if root.tag != "videos":
        raise ParseError(f"Expected a <videos> collection, got <{root.tag}>")

    records = []
    for node in root.findall("video"):
        fields = {}
        for child in node:
            # Repeated tags: the first one wins
            if child.tag in VideoRecord.model_fields and child.tag not in fields:
                fields[child.tag] = child.text
        try:
            records.append(VideoRecord.model_validate(fields))
        except ValidationError as e:
            raise ParseError(f"Invalid video record: {e}") from e

    return records


def paginate(records: list[VideoRecord], page: int) -> tuple[list[VideoRecord], bool]:
    """Cut one page out of the full record list.

    Returns:
        (records_on_page, is_last_page)
    """
    page = max(page, 1)
    total = len(records)
    start = (page - 1) * PAGE_SIZE
    end = min(page * PAGE_SIZE, total)
    return records[start:end], end == total


class VimeoRepository(RepositoryPlugin):
    """File picker repository for public Vimeo videos.

    Videos are returned as external links; the picker embeds them.
    """

    repository_type = "vimeo"

    def __init__(
        self,
        instance_id: str,
        session_store: SessionStore,
        fetcher: FeedFetcher | None = None,
        options: dict[str, Any] | None = None,
    ):
        super().__init__(instance_id, session_store, options)
        self._fetcher = fetcher
        self.keyword = ""
        self.feed_url: str | None = None

    @property
    def fetcher(self) -> FeedFetcher:
        """The feed fetcher, created on first use when none was given."""
        if self._fetcher is None:
            self._fetcher = FeedFetcher()
        return self._fetcher

    def check_login(self) -> bool:
        return bool(self.keyword)

    def print_login(self) -> dict[str, Any]:
        search = {
            "type": "text",
            "id": "vimeo_search",
            "name": "s",
            "label": get_string("search") + ": ",
        }
        return {
            "login": [search],
            "login_btn_label": get_string("searchbutton"),
            "login_btn_action": "search",
            # The form never changes, so the picker may cache it
            "allowcaching": True,
        }

    def search(
        self,
        keyword: str,
        page: int = 0,
        sort: SortOrder | None = None,
    ) -> ListingResponse:
        query = SearchQuery(keyword=keyword, page=page, sort=sort)
        if query.sort is not None:
            logger.debug(f"Sort order {query.sort.value!r} is not supported by the Vimeo feed; ignoring")

        query.keyword = resolve_keyword(self.session_store, self.instance_id, query.keyword, query.page)
        self.keyword = query.keyword

        page = query.normalized_page
        result = self.fetch_page(query.keyword, page)
        return build_listing(result, page)

    def fetch_page(self, keyword: str, page: int) -> PageResult:
        self.feed_url = feed_url(keyword)
        content = self.fetcher.get(self.feed_url)
        records = parse_videos(content)

        on_page, is_last_page = paginate(records, page)
        logger.info(
            f"Fetched {len(records)} videos for {keyword!r}, "
            f"page {max(page, 1)} has {len(on_page)}"
        )

        return PageResult(
            entries=[ListingEntry.from_record(record) for record in on_page],
            is_last_page=is_last_page,
        )

    def supported_filetypes(self) -> list[str]:
        return ["video"]

    def supported_returntypes(self) -> ReturnType:
        return ReturnType.EXTERNAL

    def contains_private_data(self) -> bool:
        return False
