"""Browser-style key/value storage persisted to a JSON file."""

import json
import os
import tempfile
from pathlib import Path

from src.veloria.core.logging import get_logger

logger = get_logger(__name__)


class LocalStorage:
    """String-to-string store with the ``localStorage`` API.

    With a ``path`` every write is flushed to disk atomically; without one
    the store lives in memory for the life of the object.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        self._items: dict[str, str] = {}
        if self.path is not None and self.path.exists():
            self._items = self._load(self.path)

    @staticmethod
    def _load(path: Path) -> dict[str, str]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable storage file", path=str(path), error=str(e))
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".storage-")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(self._items, f)
        os.replace(tmp, self.path)

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)
        self._flush()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()

    def clear(self) -> None:
        self._items.clear()
        self._flush()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
