"""Core data models for videorepo."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


# Listing constants (fixed by the host's file picker, not configurable)
PAGE_SIZE = 27
THUMBNAIL_WIDTH = 100
THUMBNAIL_HEIGHT = 75

# The picker filters by file extension; remote videos have none
TITLE_SUFFIX = ".avi"


class SortOrder(Enum):
    """Sort options offered by the search form."""
    PUBLISHED = "published"
    RATING = "rating"
    RELEVANCE = "relevance"
    VIEWCOUNT = "viewcount"


@dataclass
class SearchQuery:
    """One paginated search request."""
    keyword: str = ""
    page: int = 1
    sort: SortOrder | None = None

    @property
    def normalized_page(self) -> int:
        """Page number with non-positive values clamped to 1."""
        return max(self.page or 1, 1)


class VideoRecord(BaseModel):
    """A single <video> node from the provider feed."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    description: str = ""
    thumbnail_small: str = ""
    url: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _empty_when_missing(cls, value: Any) -> Any:
        # Self-closing XML nodes have no text
        if value is None:
            return ""
        return value


@dataclass
class ListingEntry:
    """A remote video as presented to the file picker."""
    shorttitle: str
    thumbnail_title: str
    title: str
    thumbnail: str
    source: str
    thumbnail_width: int = THUMBNAIL_WIDTH
    thumbnail_height: int = THUMBNAIL_HEIGHT
    size: str = ""
    date: str = ""

    @classmethod
    def from_record(cls, record: VideoRecord) -> "ListingEntry":
        """Project a feed record into a listing entry."""
        return cls(
            shorttitle=record.title,
            thumbnail_title=record.description or record.title,
            title=record.title + TITLE_SUFFIX,
            thumbnail=record.thumbnail_small,
            source=record.url,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "shorttitle": self.shorttitle,
            "thumbnail_title": self.thumbnail_title,
            "title": self.title,
            "thumbnail": self.thumbnail,
            "thumbnail_width": self.thumbnail_width,
            "thumbnail_height": self.thumbnail_height,
            "size": self.size,
            "date": self.date,
            "source": self.source,
        }


@dataclass
class PageResult:
    """One page of listing entries cut from a feed."""
    entries: list[ListingEntry] = field(default_factory=list)
    is_last_page: bool = True


@dataclass
class ListingResponse:
    """Listing envelope returned to the host."""
    page: int
    pages: int
    entries: list[ListingEntry] = field(default_factory=list)
    nologin: bool = True
    norefresh: bool = True
    nosearch: bool = True

    @property
    def has_more(self) -> bool:
        return self.pages > self.page

    def to_dict(self) -> dict[str, Any]:
        return {
            "nologin": self.nologin,
            "page": self.page,
            "list": [entry.to_dict() for entry in self.entries],
            "norefresh": self.norefresh,
            "nosearch": self.nosearch,
            "pages": self.pages,
        }
