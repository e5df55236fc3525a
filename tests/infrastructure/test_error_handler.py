import pytest

from gatelog.infrastructure.error_handler import (
    GatelogError,
    ConfigurationError,
    DispatchError,
    CategoryNotEnabledError,
    LevelNotEnabledError,
    WriterNotFoundError,
)
from gatelog.models import Category, LogLevel


# ---- Exception classes -----------------------------------------------------

def test_gatelog_error_message_and_original():
    original = ValueError("boom")
    err = GatelogError("failed", original)
    assert err.message == "failed"
    assert err.original_error is original
    assert "failed" in str(err)
    assert "Original: boom" in str(err)


def test_configuration_error_stores_message():
    err = ConfigurationError("msg")
    assert err.message == "msg"
    assert str(err) == "msg"
    assert not isinstance(err, DispatchError)


@pytest.mark.parametrize("exc, attr, value, text", [
    (CategoryNotEnabledError("main"), "category", "main", "Category main not enabled"),
    (LevelNotEnabledError("1"), "level", "1", "Level 1 not enabled"),
    (WriterNotFoundError("window"), "writer_id", "window", "Writer window not found"),
])
def test_dispatch_errors(exc, attr, value, text):
    assert isinstance(exc, DispatchError)
    assert isinstance(exc, GatelogError)
    assert getattr(exc, attr) == value
    assert str(exc) == text


def test_builtin_identifiers_render_as_values():
    assert str(CategoryNotEnabledError(Category.DEFAULT)) == "Category DEFAULT_CATEGORY not enabled"
    assert str(LevelNotEnabledError(LogLevel.ERROR)) == "Level ERROR_LEVEL not enabled"
