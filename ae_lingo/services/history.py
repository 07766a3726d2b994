"""
Translation History
===================
Bounded, newest-first log of recent successful translations.

The whole list is serialized as JSON under one storage key and rewritten
on every change.
"""
import json
import threading
import time
import uuid
from typing import List, Optional

from ae_lingo.config import config
from ae_lingo.config.constants import InputMode
from ae_lingo.database.repositories import StorageRepository, get_storage_repository
from ae_lingo.models.translation import HistoryEntry, TranslationItem
from ae_lingo.utils.logging import get_logger


def make_snippet(text: str, length: int = None) -> str:
    """Shorten query text for display in the history list."""
    length = length or config.history.snippet_length
    return text[:length] + '...' if len(text) > length else text


class HistoryService:
    """Recent translations, capped at ``max_items``."""

    def __init__(
        self,
        repository: StorageRepository = None,
        max_items: int = None,
        storage_key: str = None
    ):
        self.repo = repository or get_storage_repository()
        self.max_items = max_items or config.history.max_items
        self.storage_key = storage_key or config.history.storage_key
        self.logger = get_logger().db_logger
        self._lock = threading.Lock()
        self._entries: List[HistoryEntry] = self._load()

    def _load(self) -> List[HistoryEntry]:
        stored = self.repo.get_item(self.storage_key)
        if not stored:
            return []
        try:
            entries = [HistoryEntry.from_dict(item) for item in json.loads(stored)]
        except (ValueError, TypeError, KeyError) as e:
            self.logger.error(f"Failed to load history: {e}")
            return []
        return entries[:self.max_items]

    def _save(self, entries: List[HistoryEntry]) -> None:
        payload = json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False)
        self.repo.set_item(self.storage_key, payload)
        self._entries = entries

    def list(self) -> List[HistoryEntry]:
        """Entries, newest first."""
        with self._lock:
            return list(self._entries)

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        """Find an entry by id."""
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        return None

    def add(self, mode: InputMode, snippet: str, results: List[TranslationItem]) -> HistoryEntry:
        """
        Record a translation at the head of the list.

        Entries beyond ``max_items`` are dropped, oldest first.
        """
        entry = HistoryEntry(
            id=uuid.uuid4().hex,
            timestamp=int(time.time() * 1000),
            mode=mode,
            query_snippet=snippet,
            results=list(results)
        )
        with self._lock:
            self._save([entry] + self._entries[:self.max_items - 1])
        return entry

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._save([])
        self.logger.info("History cleared")


# Global history instance
_history_instance: Optional[HistoryService] = None


def get_history_service() -> HistoryService:
    """Get or create the global history service."""
    global _history_instance
    if _history_instance is None:
        _history_instance = HistoryService()
    return _history_instance
