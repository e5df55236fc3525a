"""
Core data models API surface for Gatelog.

This file re-exports model classes from domain-specific modules so callers
can write ``from gatelog.models import X``.
"""

from .logging import (
    Category,
    LogLevel,
    DEFAULT_CATEGORY,
    DEFAULT_LEVELS,
    LogRequest,
    LogEntry,
)
from .config import LoggerConfig

__all__ = [
    # Log models
    "Category",
    "LogLevel",
    "DEFAULT_CATEGORY",
    "DEFAULT_LEVELS",
    "LogRequest",
    "LogEntry",
    # Config models
    "LoggerConfig",
]
