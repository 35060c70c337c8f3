"""
Key-value storage for persisted client state.

The only value persisted by the client is the credential token, stored under
TOKEN_KEY. MemoryStorage keeps values for the lifetime of the process (one per
browser session in the Streamlit front-end); JsonFileStorage survives restarts.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class KeyValueStorage(ABC):
    """Minimal string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class MemoryStorage(KeyValueStorage):
    """In-process storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """
    Storage backed by a small JSON object on disk.

    The file is re-read on every access so separate processes see each other's
    writes. A missing or corrupt file reads as empty.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, values: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(values, indent=2), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        self._save(values)

    def remove(self, key: str) -> None:
        values = self._load()
        if key in values:
            del values[key]
            self._save(values)
