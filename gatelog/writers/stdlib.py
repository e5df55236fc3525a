"""
Writer that forwards entries to a standard library logger.
"""

import logging
from typing import Dict, Optional

from ..models import LogEntry, LogLevel


_LEVEL_MAP: Dict[str, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.MISC: logging.INFO,
}


class LoggingBridgeWriter:
    """
    Emits one stdlib log record per entry.

    The record message is the entry message as-is. The full entry is
    attached to the record as ``gatelog_entry``.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level_map: Optional[Dict[str, int]] = None,
        default_level: int = logging.INFO
    ):
        self.logger = logger or logging.getLogger('Gatelog.entries')
        self.level_map = dict(_LEVEL_MAP)
        if level_map:
            self.level_map.update(level_map)
        self.default_level = default_level

    def resolve_level(self, level: str) -> int:
        return self.level_map.get(level, self.default_level)

    def __call__(self, entry: LogEntry) -> None:
        self.logger.log(
            self.resolve_level(entry.level),
            entry.message,
            extra={"gatelog_entry": entry}
        )
