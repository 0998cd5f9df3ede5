"""In-memory session store."""

from videorepo.session.base import SessionStore


class MemorySessionStore(SessionStore):
    """Session store backed by a dict. One instance per host session."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def close(self) -> None:
        self._data.clear()
