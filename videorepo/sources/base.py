"""Base protocols for repository plugins.

A repository plugin lets the host's file picker browse a remote catalog:
1. It renders a search form (print_login)
2. It answers searches with a paginated listing (search / fetch_page)
3. It declares what it can return (file types, return types)

To create a new repository plugin:
1. Create a new directory under videorepo/sources/
2. Implement RepositoryPlugin in adapter.py
3. Export a `plugin` (SourcePlugin instance) from __init__.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable

from videorepo.models import ListingResponse, PageResult, SortOrder
from videorepo.session.base import SessionStore


# =============================================================================
# Errors
# =============================================================================


class RepositoryError(Exception):
    """Base class for failures while talking to a remote repository."""


class FetchError(RepositoryError):
    """The feed could not be retrieved (network, timeout, non-2xx)."""


class ParseError(RepositoryError):
    """The feed body is not a valid video list."""


# =============================================================================
# Capabilities
# =============================================================================


class ReturnType(IntFlag):
    """How selected files are handed back to the host."""
    EXTERNAL = 1  # Link to the remote resource
    INTERNAL = 2  # Copy into the host's file store
    REFERENCE = 4  # Alias kept in sync with the remote file


# =============================================================================
# Protocols
# =============================================================================


class RepositoryPlugin(ABC):
    """Interface between the host's file picker and a remote catalog.

    Example:
        class MyRepository(RepositoryPlugin):
            repository_type = "my_repo"

            def print_login(self) -> dict[str, Any]:
                return {"login": [...], "login_btn_action": "search"}

            def fetch_page(self, keyword: str, page: int) -> PageResult:
                return PageResult(entries=[...], is_last_page=True)

            def search(self, keyword, page=0, sort=None) -> ListingResponse:
                return build_listing(self.fetch_page(keyword, page), page)
    """

    repository_type: str = ""

    def __init__(
        self,
        instance_id: str,
        session_store: SessionStore,
        options: dict[str, Any] | None = None,
    ):
        self.instance_id = instance_id
        self.session_store = session_store
        self.options = options or {}

    @abstractmethod
    def print_login(self) -> dict[str, Any]:
        """Describe the form the picker shows before the first search."""
        pass

    @abstractmethod
    def search(
        self,
        keyword: str,
        page: int = 0,
        sort: SortOrder | None = None,
    ) -> ListingResponse:
        """Answer a search request from the picker.

        Args:
            keyword: Search text. Empty when the picker asks for another
                page of the previous search.
            page: Requested page, 1-indexed. Non-positive means first page.
            sort: Sort option chosen in the form, if any.

        Raises:
            FetchError: If the remote feed could not be retrieved.
            ParseError: If the remote feed is not a valid video list.
        """
        pass

    @abstractmethod
    def fetch_page(self, keyword: str, page: int) -> PageResult:
        """Fetch one page of results for an already-resolved keyword."""
        pass

    @abstractmethod
    def supported_filetypes(self) -> list[str]:
        pass

    @abstractmethod
    def supported_returntypes(self) -> ReturnType:
        pass

    def check_login(self) -> bool:
        return True

    def get_listing(self, path: str = "", page: str = "") -> dict[str, Any]:
        """Browse the repository tree. Search-only plugins return nothing."""
        return {}

    def global_search(self) -> bool:
        """Whether the host may include this repository in global searches."""
        return False

    def contains_private_data(self) -> bool:
        return True

    def capabilities(self) -> dict[str, Any]:
        """Static capability declarations, for display and registration."""
        return {
            "repository_type": self.repository_type,
            "filetypes": self.supported_filetypes(),
            "returntypes": int(self.supported_returntypes()),
            "global_search": self.global_search(),
            "contains_private_data": self.contains_private_data(),
        }


# =============================================================================
# Plugin Definition
# =============================================================================


@dataclass
class SourcePlugin:
    """A repository plugin type and how to build instances of it."""

    factory: Callable[..., RepositoryPlugin]
    repository_type: str
    description: str = ""

    def create(self, instance_id: str, session_store: SessionStore, **kwargs: Any) -> RepositoryPlugin:
        """Create a repository instance bound to a session store."""
        return self.factory(instance_id, session_store, **kwargs)
