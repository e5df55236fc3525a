"""
Dispatch engine: gates log requests, resolves writers and invokes them,
optionally under one lock per Logger.
"""

import threading
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from ..models import (
    LogRequest, LogEntry, LoggerConfig,
    DEFAULT_CATEGORY, DEFAULT_LEVELS
)
from ..infrastructure.error_handler import (
    DispatchError, CategoryNotEnabledError, LevelNotEnabledError
)
from ..infrastructure.logger import logger
from .registry import EnablementRegistry, WriterRegistry, Writer


####
##      LOGGER
#####
class Logger:
    """
    Sole emission point for diagnostic and audit events of an application.

    Each instance owns its own registries; loggers never share state.
    With ``use_lock`` at most one writer callback runs at a time across
    the whole instance. Gating checks always run outside the lock.

    A writer must not call ``log`` on the same locked Logger from inside
    its callback: the lock is not re-entrant.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig()
        self._enablement = EnablementRegistry()
        self._writers = WriterRegistry()
        self._lock: Optional[threading.Lock] = None

        # Entries are stamped from this wall-clock anchor plus monotonic elapsed time
        self._clock_anchor = datetime.now(timezone.utc)
        self._clock_base = time.monotonic_ns()

        if self._config.enable_default_levels:
            for level in DEFAULT_LEVELS:
                self._enablement.enable_level(level)

        if self._config.enable_default_category:
            self._enablement.enable_category(DEFAULT_CATEGORY)

        if self._config.use_lock:
            self._lock = threading.Lock()

        logger.debug(
            "Logger created: "
            f"categories_enforced={self._config.categories_enforced}, "
            f"levels_enforced={self._config.levels_enforced}, "
            f"use_lock={self._config.use_lock}"
        )

    @property
    def config(self) -> LoggerConfig:
        return self._config

    # Writers

    def add_writer(self, writer_id: str, callback: Writer) -> None:
        self._writers.add(writer_id, callback)

    def remove_writer(self, writer_id: str) -> bool:
        return self._writers.remove(writer_id)

    def has_writer(self, writer_id: str) -> bool:
        return writer_id in self._writers

    # Enablement

    def enable_category(self, category: str) -> None:
        self._enablement.enable_category(category)

    def disable_category(self, category: str) -> None:
        self._enablement.disable_category(category)

    def disable_all_categories(self) -> None:
        self._enablement.disable_all_categories()

    def is_category_enabled(self, category: str) -> bool:
        return self._enablement.is_category_enabled(category)

    def enable_level(self, level: str) -> None:
        self._enablement.enable_level(level)

    def disable_level(self, level: str) -> None:
        self._enablement.disable_level(level)

    def disable_all_levels(self) -> None:
        self._enablement.disable_all_levels()

    def is_level_enabled(self, level: str) -> bool:
        return self._enablement.is_level_enabled(level)

    # Dispatch

    def can_log(self, category: str, level: str) -> bool:
        """Whether both gates would pass for this category and level."""
        return self._gate_error(category, level) is None

    def log(self, request: Optional[LogRequest] = None, **fields: Any) -> None:
        """
        Gate, resolve and dispatch a single log request.

        Args:
            request: Prepared request; when omitted, one is built from the
                keyword fields (message, metadata, writer, level, category)

        Raises:
            CategoryNotEnabledError: Category gate rejected the request
            LevelNotEnabledError: Level gate rejected the request
            WriterNotFoundError: No writer registered under request.writer

        Exceptions raised by the writer itself propagate unchanged. Its
        return value is ignored.
        """
        if request is None:
            request = LogRequest(**fields)
        elif fields:
            raise TypeError("Pass either a LogRequest or keyword fields, not both")

        # Gates come strictly before writer resolution
        self._check_gates(request.category, request.level)
        write = self._writers.lookup(request.writer)

        entry = LogEntry.from_request(request, self._now())

        if self._lock is not None:
            with self._lock:
                write(entry)
        else:
            write(entry)

    def _now(self) -> datetime:
        elapsed_ns = time.monotonic_ns() - self._clock_base
        return self._clock_anchor + timedelta(microseconds=elapsed_ns // 1000)

    def _gate_error(self, category: str, level: str) -> Optional[DispatchError]:
        if (self._config.categories_enforced
                and not self._enablement.is_category_enabled(category)):
            return CategoryNotEnabledError(category)

        if (self._config.levels_enforced
                and not self._enablement.is_level_enabled(level)):
            return LevelNotEnabledError(level)

        return None

    def _check_gates(self, category: str, level: str) -> None:
        error = self._gate_error(category, level)
        if error is not None:
            logger.debug(f"Rejected log request: {error}")
            raise error


def new_logger(config: Optional[LoggerConfig] = None, **options: Any) -> Logger:
    """
    Create a Logger from a config or from keyword options.

    Keyword options accept the historical names understood by
    ``LoggerConfig.from_options`` (e.g. ``allow_disabled``).
    """
    if config is not None and options:
        raise TypeError("Pass either a LoggerConfig or keyword options, not both")
    if config is None:
        config = LoggerConfig.from_options(**options)
    return Logger(config)
