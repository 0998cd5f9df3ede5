"""Session state for repository instances."""

from videorepo.session.base import SessionStore
from videorepo.session.memory import MemorySessionStore
from videorepo.session.file import FileSessionStore
from videorepo.session.factory import SessionStoreType, create_session_store
from videorepo.session.keywords import resolve_keyword, session_key

__all__ = [
    "SessionStore",
    "MemorySessionStore",
    "FileSessionStore",
    "SessionStoreType",
    "create_session_store",
    "resolve_keyword",
    "session_key",
]
