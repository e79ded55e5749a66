import logging
import os
import tempfile
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from prospector.schemas.search import SavedSearch, SearchRequest, SearchResult

logger = logging.getLogger(__name__)

STORAGE_KEY = "state_chem_prospector_history"
MAX_SAVED_SEARCHES = 20

_history_adapter = TypeAdapter(list[SavedSearch])


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class JsonFileStore:
    """One file per key under ``directory``; writes replace the file atomically."""

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp, self._path(key))
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class HistoryStore:
    """Most-recent-first list of completed searches, re-persisted on every change."""

    def __init__(self, backend: KeyValueStore, capacity: int = MAX_SAVED_SEARCHES):
        self._backend = backend
        self._capacity = capacity

    def load(self) -> list[SavedSearch]:
        try:
            stored = self._backend.get(STORAGE_KEY)
            return _history_adapter.validate_json(stored) if stored else []
        except (OSError, ValueError, ValidationError):
            logger.exception("Failed to load search history")
            return []

    def get(self, search_id: str) -> SavedSearch | None:
        return next((s for s in self.load() if s.id == search_id), None)

    def record(self, request: SearchRequest, result: SearchResult) -> list[SavedSearch]:
        saved = SavedSearch(
            id=uuid.uuid4().hex,
            timestamp=datetime.now(timezone.utc),
            params=request,
            result_count=len(result.prospects),
            results=result,
        )
        history = [saved, *self.load()][: self._capacity]
        self._persist(history)
        logger.info(
            "Saved search %s (%d prospects, %d in history)",
            saved.id, saved.result_count, len(history),
        )
        return history

    def remove(self, search_id: str) -> list[SavedSearch]:
        history = [s for s in self.load() if s.id != search_id]
        self._persist(history)
        return history

    def clear(self) -> None:
        try:
            self._backend.delete(STORAGE_KEY)
        except OSError:
            logger.exception("Failed to clear search history")

    def _persist(self, history: list[SavedSearch]) -> None:
        try:
            self._backend.set(STORAGE_KEY, _history_adapter.dump_json(history).decode())
        except OSError:
            logger.exception("Failed to save search history")
