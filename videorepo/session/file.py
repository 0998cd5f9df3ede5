"""JSON file-based session store."""

import json
import logging
from pathlib import Path

from videorepo.session.base import SessionStore

logger = logging.getLogger(__name__)


class FileSessionStore(SessionStore):
    """Session store persisted to a JSON file.

    Lets separate CLI invocations share one session, so a
    ``--page 2`` run can reuse the keyword of the previous search.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self._data: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2))

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def delete(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._save()
