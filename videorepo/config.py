"""Configuration management for videorepo."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from videorepo.http import DEFAULT_CACHE_TTL, DEFAULT_USER_AGENT, FeedFetcher
from videorepo.session import SessionStore, SessionStoreType, create_session_store


DEFAULT_CONFIG_PATH = "~/.videorepo/config.json"
DEFAULT_SESSION_PATH = "~/.videorepo/session.json"


@dataclass
class Config:
    """Application configuration."""

    session_store_type: SessionStoreType = SessionStoreType.FILE
    session_store_path: str = DEFAULT_SESSION_PATH
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL
    user_agent: str = DEFAULT_USER_AGENT
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str = DEFAULT_CONFIG_PATH) -> "Config":
        """Load config from a JSON file, or return defaults if not found."""
        config_path = Path(path).expanduser()

        if not config_path.exists():
            return cls()

        try:
            data = json.loads(config_path.read_text())
            return cls(
                session_store_type=SessionStoreType(data.get("session_store_type", "file")),
                session_store_path=data.get("session_store_path", DEFAULT_SESSION_PATH),
                cache_ttl_seconds=int(data.get("cache_ttl_seconds", DEFAULT_CACHE_TTL)),
                user_agent=data.get("user_agent", DEFAULT_USER_AGENT),
                extra=data.get("extra", {}),
            )
        except (json.JSONDecodeError, KeyError, ValueError, TypeError):
            return cls()

    def save(self, path: str = DEFAULT_CONFIG_PATH) -> None:
        """Save config to a JSON file."""
        config_path = Path(path).expanduser()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "session_store_type": self.session_store_type.value,
            "session_store_path": self.session_store_path,
            "cache_ttl_seconds": self.cache_ttl_seconds,
            "user_agent": self.user_agent,
            "extra": self.extra,
        }
        config_path.write_text(json.dumps(data, indent=2))

    def create_session_store(self) -> SessionStore:
        """Create a session store instance from this config."""
        return create_session_store(self.session_store_type, self.session_store_path)

    def create_fetcher(self) -> FeedFetcher:
        """Create a feed fetcher using the configured cache and user agent."""
        return FeedFetcher(cache_ttl=self.cache_ttl_seconds, user_agent=self.user_agent)
