import pytest

from gatelog.core.registry import WriterRegistry
from gatelog.infrastructure.error_handler import WriterNotFoundError


def noop(entry):
    return None


def test_lookup_missing_writer_raises():
    registry = WriterRegistry()

    with pytest.raises(WriterNotFoundError) as exc_info:
        registry.lookup("missing")

    assert exc_info.value.writer_id == "missing"


def test_add_and_lookup():
    registry = WriterRegistry()
    registry.add("out", noop)

    assert registry.lookup("out") is noop
    assert "out" in registry
    assert len(registry) == 1


def test_last_registration_wins():
    registry = WriterRegistry()

    def first(entry):
        pass

    def second(entry):
        pass

    registry.add("w", first)
    registry.add("w", second)

    assert registry.lookup("w") is second
    assert registry.names() == ["w"]


def test_remove_writer():
    registry = WriterRegistry()
    registry.add("w", noop)

    assert registry.remove("w") is True
    assert registry.remove("w") is False
    assert "w" not in registry


def test_non_callable_writer_rejected():
    registry = WriterRegistry()

    with pytest.raises(TypeError):
        registry.add("w", "not a function")

    assert "w" not in registry
