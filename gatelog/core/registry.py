"""
Registries owned by a single Logger: enabled categories/levels and writers.
"""

import threading
from typing import Callable, Dict, FrozenSet, List

from ..models import LogEntry
from ..infrastructure.error_handler import WriterNotFoundError
from ..infrastructure.logger import logger


Writer = Callable[[LogEntry], object]


####
##      ENABLEMENT REGISTRY
#####
class EnablementRegistry:
    """
    Two independent boolean membership stores, categories and levels.

    Absence means disabled. Identifiers that were ever enabled stay known
    after being disabled, so ``disable_all_*`` can switch them off without
    forgetting them.
    """

    def __init__(self):
        self._categories: Dict[str, bool] = {}
        self._levels: Dict[str, bool] = {}
        self._lock = threading.Lock()

    # Categories

    def enable_category(self, category: str) -> None:
        with self._lock:
            self._categories[category] = True

    def disable_category(self, category: str) -> None:
        self._disable(self._categories, category)

    def disable_all_categories(self) -> None:
        self._disable_all(self._categories)

    def is_category_enabled(self, category: str) -> bool:
        return self._categories.get(category, False)

    def enabled_categories(self) -> FrozenSet[str]:
        return self._enabled(self._categories)

    def known_categories(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._categories)

    # Levels

    def enable_level(self, level: str) -> None:
        with self._lock:
            self._levels[level] = True

    def disable_level(self, level: str) -> None:
        self._disable(self._levels, level)

    def disable_all_levels(self) -> None:
        self._disable_all(self._levels)

    def is_level_enabled(self, level: str) -> bool:
        return self._levels.get(level, False)

    def enabled_levels(self) -> FrozenSet[str]:
        return self._enabled(self._levels)

    def known_levels(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._levels)

    # Helpers

    def _disable(self, mapping: Dict[str, bool], key: str) -> None:
        with self._lock:
            if key in mapping:
                mapping[key] = False

    def _disable_all(self, mapping: Dict[str, bool]) -> None:
        with self._lock:
            for key in mapping:
                mapping[key] = False

    def _enabled(self, mapping: Dict[str, bool]) -> FrozenSet[str]:
        with self._lock:
            return frozenset(key for key, on in mapping.items() if on)


####
##      WRITER REGISTRY
#####
class WriterRegistry:
    """Mapping of writer identifier to callback. Last registration wins."""

    def __init__(self):
        self._writers: Dict[str, Writer] = {}
        self._lock = threading.Lock()

    def add(self, writer_id: str, callback: Writer) -> None:
        """
        Register or replace the callback for a writer identifier.

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError(f"Writer {writer_id} callback must be callable")

        with self._lock:
            replaced = writer_id in self._writers
            self._writers[writer_id] = callback

        if replaced:
            logger.debug(f"Replaced writer {writer_id}")

    def remove(self, writer_id: str) -> bool:
        with self._lock:
            removed = self._writers.pop(writer_id, None) is not None

        if removed:
            logger.debug(f"Removed writer {writer_id}")
        return removed

    def lookup(self, writer_id: str) -> Writer:
        """
        Resolve a writer identifier.

        Raises:
            WriterNotFoundError: If nothing is registered under writer_id
        """
        try:
            return self._writers[writer_id]
        except KeyError:
            raise WriterNotFoundError(writer_id) from None

    def names(self) -> List[str]:
        with self._lock:
            return list(self._writers)

    def __contains__(self, writer_id: object) -> bool:
        return writer_id in self._writers

    def __len__(self) -> int:
        return len(self._writers)
