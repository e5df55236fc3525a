"""
Gatelog: an embeddable logging dispatcher.

Log requests are gated against enabled categories and levels and routed to
one named writer.
"""

from .core.dispatcher import Logger, new_logger
from .core.registry import EnablementRegistry, WriterRegistry
from .models import (
    Category,
    LogLevel,
    DEFAULT_CATEGORY,
    DEFAULT_LEVELS,
    LogRequest,
    LogEntry,
    LoggerConfig,
)
from .infrastructure.error_handler import (
    GatelogError,
    ConfigurationError,
    DispatchError,
    CategoryNotEnabledError,
    LevelNotEnabledError,
    WriterNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "Logger",
    "new_logger",
    "EnablementRegistry",
    "WriterRegistry",
    "Category",
    "LogLevel",
    "DEFAULT_CATEGORY",
    "DEFAULT_LEVELS",
    "LogRequest",
    "LogEntry",
    "LoggerConfig",
    "GatelogError",
    "ConfigurationError",
    "DispatchError",
    "CategoryNotEnabledError",
    "LevelNotEnabledError",
    "WriterNotFoundError",
]
