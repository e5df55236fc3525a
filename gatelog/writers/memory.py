"""
In-memory writer that keeps every entry it receives.
"""

import threading
from typing import List, Optional

from ..models import LogEntry


class CollectingWriter:
    """Appends each received entry to a list. Safe under concurrent calls."""

    def __init__(self):
        self._entries: List[LogEntry] = []
        self._lock = threading.Lock()

    def __call__(self, entry: LogEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    @property
    def entries(self) -> List[LogEntry]:
        with self._lock:
            return list(self._entries)

    @property
    def messages(self) -> List[str]:
        return [entry.message for entry in self.entries]

    @property
    def last(self) -> Optional[LogEntry]:
        with self._lock:
            return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
