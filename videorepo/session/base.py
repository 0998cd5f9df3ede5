"""Abstract base class for session stores."""

from abc import ABC, abstractmethod


class SessionStore(ABC):
    """Key-value state that lives for one host session.

    The host owns the lifecycle: it creates a store when the session starts
    and closes it when the session ends.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get a value, or None if the key is not set."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Set a value, replacing any previous one."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        pass

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def close(self) -> None:
        """Release any resources held by the store."""
        pass

    def __enter__(self) -> "SessionStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
