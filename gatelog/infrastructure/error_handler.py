"""
Error taxonomy for Gatelog.

Every failure of ``Logger.log`` is raised synchronously as a subclass of
``DispatchError``. Nothing here is retried.
"""

from typing import Optional


class GatelogError(Exception):
    """Base exception for all Gatelog errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class ConfigurationError(GatelogError):
    """Raised for unknown or contradictory logger options."""
    pass


class DispatchError(GatelogError):
    """Raised when a log request is rejected by the dispatch engine."""
    pass


class CategoryNotEnabledError(DispatchError):
    """The request's category is not enabled and enforcement is active."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Category {category} not enabled")


class LevelNotEnabledError(DispatchError):
    """The request's level is not enabled and enforcement is active."""

    def __init__(self, level: str):
        self.level = level
        super().__init__(f"Level {level} not enabled")


class WriterNotFoundError(DispatchError):
    """No writer is registered under the requested identifier."""

    def __init__(self, writer_id: str):
        self.writer_id = writer_id
        super().__init__(f"Writer {writer_id} not found")


__all__ = [
    "GatelogError",
    "ConfigurationError",
    "DispatchError",
    "CategoryNotEnabledError",
    "LevelNotEnabledError",
    "WriterNotFoundError",
]
