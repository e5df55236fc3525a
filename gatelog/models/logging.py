"""
Log request and entry models for Gatelog.

Categories and levels are opaque string identifiers. The enums below only
provide convenience constants; any string is valid wherever a category or
level is expected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict


class Category(str, Enum):
    """Built-in category identifiers."""

    DEFAULT = "DEFAULT_CATEGORY"

    def __str__(self) -> str:
        return self.value


class LogLevel(str, Enum):
    """Built-in level identifiers. Unordered: no level outranks another."""

    DEBUG = "DEBUG_LEVEL"
    ERROR = "ERROR_LEVEL"
    INFO = "INFO_LEVEL"
    WARN = "WARN_LEVEL"
    MISC = "MISC_LEVEL"

    def __str__(self) -> str:
        return self.value


DEFAULT_CATEGORY = Category.DEFAULT
DEFAULT_LEVELS = (
    LogLevel.DEBUG,
    LogLevel.ERROR,
    LogLevel.INFO,
    LogLevel.WARN,
    LogLevel.MISC,
)


@dataclass
class LogRequest:
    """Caller-built log request. Validated only when dispatched."""

    message: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
    writer: str = ""
    level: str = ""
    category: str = ""


@dataclass(frozen=True)
class LogEntry:
    """Accepted log event handed to exactly one writer."""

    timestamp: datetime
    message: str
    metadata: Dict[str, Any] = field(hash=False)
    writer: str
    level: str
    category: str

    @classmethod
    def from_request(cls, request: LogRequest, timestamp: datetime) -> "LogEntry":
        return cls(
            timestamp=timestamp,
            message=request.message,
            metadata=request.metadata,
            writer=request.writer,
            level=request.level,
            category=request.category,
        )


__all__ = [
    "Category",
    "LogLevel",
    "DEFAULT_CATEGORY",
    "DEFAULT_LEVELS",
    "LogRequest",
    "LogEntry",
]
