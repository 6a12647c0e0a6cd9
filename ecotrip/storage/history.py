"""
History log of past estimates.
Kept in memory and mirrored to a JSON file when a path is configured.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..models.history import HistoryEntry

logger = logging.getLogger(__name__)


class HistoryStore:
    """
    Ordered, insertion-preserving log of estimate results.

    Entries are listed oldest first, the way the history table and the
    chart read them. When ``path`` is set the whole log is rewritten to
    that file after every change and reloaded on construction.
    """

    def __init__(self, path: Optional[str] = None, max_entries: int = 1000):
        """
        Initialize history store.

        Args:
            path: JSON file to persist to (None = in-memory only)
            max_entries: Maximum number of entries to keep (oldest are dropped)
        """
        self.path = Path(path) if path else None
        self.max_entries = max_entries
        self._entries: list[HistoryEntry] = self._load()

    def _load(self) -> list[HistoryEntry]:
        """Read the persisted log. A missing or unreadable file yields an empty log."""
        if self.path is None or not self.path.exists():
            return []

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            entries = [HistoryEntry.model_validate(item) for item in raw]
        except (OSError, ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Could not read history from {self.path}, starting empty: {e}")
            return []

        logger.info(f"Loaded {len(entries)} history entries from {self.path}")
        # Same cut as add_entry; a zero cap keeps nothing
        return entries[max(0, len(entries) - self.max_entries) :]

    def _save(self) -> None:
        """Write the log to disk. Failures are logged, never raised."""
        if self.path is None:
            return

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            payload = [entry.model_dump() for entry in self._entries]
            # Write beside the target and swap in, so a crash never leaves a truncated log
            tmp_path = self.path.with_name(self.path.name + ".tmp")
            tmp_path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(f"Could not write history to {self.path}: {e}")

    def add_entry(self, entry: HistoryEntry) -> None:
        """
        Append an entry to the end of the log.

        Args:
            entry: History entry to store
        """
        self._entries.append(entry)

        # Trim if exceeds max
        if len(self._entries) > self.max_entries:
            del self._entries[: len(self._entries) - self.max_entries]

        self._save()

    def list_entries(self, limit: Optional[int] = None, offset: int = 0) -> list[HistoryEntry]:
        """
        List history entries (oldest first).

        Args:
            limit: Maximum number of entries to return (None = all)
            offset: Number of entries to skip

        Returns:
            List of history entries
        """
        if limit is None:
            return self._entries[offset:]
        return self._entries[offset : offset + limit]

    def count(self) -> int:
        """Count total entries."""
        return len(self._entries)

    def clear(self) -> None:
        """Remove all entries, including the persisted copy."""
        self._entries.clear()
        self._save()

