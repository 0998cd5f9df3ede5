"""FastAPI server exposing videorepo to a host file picker."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from videorepo.config import Config
from videorepo.http import FeedFetcher
from videorepo.models import ListingResponse as Listing, SortOrder
from videorepo.session import MemorySessionStore, SessionStore
from videorepo.sources import (
    FetchError,
    ParseError,
    PluginRegistry,
    RepositoryPlugin,
    get_registry,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Pydantic models for API
# =============================================================================


class RepositoryTypeResponse(BaseModel):
    repository_type: str
    name: str
    filetypes: list[str]
    returntypes: int
    global_search: bool
    contains_private_data: bool


class FormFieldResponse(BaseModel):
    type: str
    id: str
    name: str
    label: str


class SearchFormResponse(BaseModel):
    login: list[FormFieldResponse]
    login_btn_label: str
    login_btn_action: str
    allowcaching: bool


class ListingEntryResponse(BaseModel):
    shorttitle: str
    thumbnail_title: str
    title: str
    thumbnail: str
    thumbnail_width: int
    thumbnail_height: int
    size: str
    date: str
    source: str


class ListingResponse(BaseModel):
    nologin: bool
    page: int
    list: list[ListingEntryResponse]
    norefresh: bool
    nosearch: bool
    pages: int


# =============================================================================
# Application state
# =============================================================================


class AppState:
    session_store: SessionStore
    registry: PluginRegistry
    fetcher: FeedFetcher


state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup application state."""
    config = Config.load()
    # One session for the server's lifetime; the host owns real sessions
    state.session_store = MemorySessionStore()
    state.registry = get_registry()
    state.fetcher = config.create_fetcher()

    yield
    state.fetcher.close()
    state.session_store.close()


def get_repository(repository_type: str, instance_id: str) -> RepositoryPlugin:
    """Build a repository instance for one request.

    Instances are not kept between requests: their state lives in the
    session store and the shared fetcher.
    """
    try:
        return state.registry.create_instance(
            repository_type, instance_id, state.session_store, fetcher=state.fetcher
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


# =============================================================================
# FastAPI app
# =============================================================================


app = FastAPI(
    title="videorepo API",
    description="Remote video catalogs for file pickers",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Routes: Repositories
# =============================================================================


@app.get("/api/repositories", response_model=list[RepositoryTypeResponse])
def list_repositories():
    """List available repository types and their capabilities."""
    results = []
    for plugin in state.registry.plugins:
        capabilities = plugin.create("_capabilities", MemorySessionStore(), fetcher=state.fetcher).capabilities()
        results.append(RepositoryTypeResponse(name=plugin.description, **capabilities))
    return results


@app.get("/api/repositories/{repository_type}/{instance_id}/form", response_model=SearchFormResponse)
def get_search_form(repository_type: str, instance_id: str):
    """Get the search form for a repository instance."""
    repository = get_repository(repository_type, instance_id)
    return SearchFormResponse(**repository.print_login())


@app.get("/api/repositories/{repository_type}/{instance_id}/search", response_model=ListingResponse)
def search_repository(
    repository_type: str,
    instance_id: str,
    s: str = Query("", description="Search keyword; omit to continue the last search"),
    page: int = Query(0, description="Page number, 1-indexed"),
    sort: SortOrder | None = Query(None, description="Sort order (not applied by Vimeo)"),
):
    """Search a repository instance."""
    repository = get_repository(repository_type, instance_id)

    try:
        listing: Listing = repository.search(s, page, sort)
    except FetchError as e:
        logger.warning(f"Search fetch failed for {repository_type}/{instance_id}: {e}")
        raise HTTPException(status_code=502, detail=f"Search failed: {e}")
    except ParseError as e:
        logger.warning(f"Search parse failed for {repository_type}/{instance_id}: {e}")
        raise HTTPException(status_code=502, detail=f"Invalid response from provider: {e}")

    return ListingResponse(**listing.to_dict())
