"""TokenStorage — durable key-value slot for the access token."""
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from texie.constants import DEFAULT_TOKEN_PATH, MSG_STORE_LOAD_FAILED, MSG_STORE_SAVE_FAILED

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path(DEFAULT_TOKEN_PATH)


class TokenStorage(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...


class MemoryTokenStorage(TokenStorage):

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value


class JsonFileTokenStorage(TokenStorage):
    """Keeps values in memory and rewrites a JSON file on every set."""

    def __init__(self, path: Path = DEFAULT_STORE_PATH) -> None:
        self._path = path
        self._store: dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        match self._path.exists():
            case True:
                try:
                    with open(self._path) as f:
                        raw = json.load(f)
                    match raw:
                        case dict():
                            self._store = {k: v for k, v in raw.items() if isinstance(v, str)}
                        case _:
                            logger.warning(MSG_STORE_LOAD_FAILED, "not a JSON object")
                except Exception as e:
                    logger.warning(MSG_STORE_LOAD_FAILED, e)
            case False:
                pass

    def _save(self) -> None:
        try:
            with open(self._path, "w") as f:
                json.dump(self._store, f, indent=2)
        except Exception as e:
            logger.warning(MSG_STORE_SAVE_FAILED, e)

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value
        self._save()
