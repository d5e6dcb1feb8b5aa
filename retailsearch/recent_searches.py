# Recent Searches - bounded, deduplicated history of submitted queries
# Persisted as a JSON array under a single key of an injected store

import json
import logging
from typing import List

from .errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10
STORAGE_KEY = "recentSearches"


class RecentSearchStore:
    """Most-recent-first list of distinct queries (case-insensitive)"""

    def __init__(self, storage, max_entries: int = DEFAULT_MAX_ENTRIES,
                 key: str = STORAGE_KEY):
        self.storage = storage
        self.max_entries = max_entries
        self.key = key
        self._entries: List[str] = self._load()

    def _load(self) -> List[str]:
        """Read the persisted list; anything unusable counts as empty."""
        try:
            raw = self.storage.get(self.key)
        except StorageError as e:
            logger.warning(f"Could not load recent searches: {e}")
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Discarding malformed recent searches: {e}")
            return []

        if not isinstance(data, list):
            logger.warning("Discarding recent searches: stored value is not a list")
            return []

        entries = []
        seen = set()
        for item in data:
            if not isinstance(item, str) or not item.strip():
                continue
            # Newest spelling wins for hand-edited lists
            if item.lower() not in seen:
                seen.add(item.lower())
                entries.append(item)
        return entries[:self.max_entries]

    def _save(self):
        self.storage.set(self.key, json.dumps(self._entries))

    def record(self, query: str) -> None:
        """
        Move ``query`` to the front of the list, dropping any entry that
        differs only in case and anything beyond ``max_entries``.

        The in-memory list is updated before persisting; a StorageError from
        the write is left for the caller to report.
        """
        if not query or not query.strip():
            return

        lowered = query.lower()
        entries = [entry for entry in self._entries if entry.lower() != lowered]
        self._entries = ([query] + entries)[:self.max_entries]
        self._save()

    def list(self) -> List[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries = []
        self._save()

    def __len__(self):
        return len(self._entries)
