"""Session store factory."""

from enum import Enum

from videorepo.session.base import SessionStore


class SessionStoreType(Enum):
    """Available session store backends."""
    MEMORY = "memory"
    FILE = "file"


def create_session_store(store_type: SessionStoreType, path: str | None = None) -> SessionStore:
    """Factory to create a session store by type.

    Args:
        store_type: The type of store to create.
        path: For FILE, the JSON file path. Ignored for MEMORY.

    Returns:
        A SessionStore instance.
    """
    from videorepo.session.file import FileSessionStore
    from videorepo.session.memory import MemorySessionStore

    match store_type:
        case SessionStoreType.MEMORY:
            return MemorySessionStore()
        case SessionStoreType.FILE:
            if not path:
                raise ValueError("File session store requires a path")
            return FileSessionStore(path)
        case _:
            raise ValueError(f"Unknown session store type: {store_type}")
