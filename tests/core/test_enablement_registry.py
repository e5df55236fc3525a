import pytest

from gatelog.core.registry import EnablementRegistry
from gatelog.models import Category, LogLevel


@pytest.fixture
def registry():
    return EnablementRegistry()


# ---- Membership defaults ---------------------------------------------------

@pytest.mark.parametrize("identifier", ["main", "", "DEFAULT_CATEGORY", Category.DEFAULT])
def test_unknown_category_is_disabled(registry, identifier):
    assert registry.is_category_enabled(identifier) is False


@pytest.mark.parametrize("identifier", ["level1", "INFO_LEVEL", LogLevel.ERROR])
def test_unknown_level_is_disabled(registry, identifier):
    assert registry.is_level_enabled(identifier) is False


# ---- Enable / disable ------------------------------------------------------

def test_enable_then_disable_category(registry):
    registry.enable_category("net")
    assert registry.is_category_enabled("net") is True

    registry.disable_category("net")
    assert registry.is_category_enabled("net") is False
    assert "net" in registry.known_categories()


def test_disable_unknown_category_leaves_it_absent(registry):
    registry.disable_category("ghost")
    assert registry.is_category_enabled("ghost") is False
    assert "ghost" not in registry.known_categories()


def test_disable_unknown_level_leaves_it_absent(registry):
    registry.disable_level("ghost")
    assert registry.is_level_enabled("ghost") is False
    assert "ghost" not in registry.known_levels()


def test_categories_and_levels_are_independent(registry):
    registry.enable_category("shared")
    assert registry.is_category_enabled("shared") is True
    assert registry.is_level_enabled("shared") is False


def test_enum_constant_and_plain_string_are_the_same_identifier(registry):
    registry.enable_level(LogLevel.INFO)
    assert registry.is_level_enabled("INFO_LEVEL") is True

    registry.enable_category("DEFAULT_CATEGORY")
    assert registry.is_category_enabled(Category.DEFAULT) is True


# ---- Disable all -----------------------------------------------------------

def test_disable_all_categories_keeps_identifiers_known(registry):
    for name in ("a", "b", "c"):
        registry.enable_category(name)

    registry.disable_all_categories()

    assert registry.enabled_categories() == frozenset()
    assert registry.known_categories() == frozenset({"a", "b", "c"})


def test_enable_after_disable_all_categories(registry):
    registry.enable_category("a")
    registry.enable_category("b")

    registry.disable_all_categories()
    registry.enable_category("x")

    assert registry.is_category_enabled("x") is True
    assert registry.is_category_enabled("a") is False
    assert registry.is_category_enabled("b") is False


def test_disable_all_levels_only_touches_levels(registry):
    registry.enable_level("l1")
    registry.enable_category("c1")

    registry.disable_all_levels()

    assert registry.is_level_enabled("l1") is False
    assert registry.is_category_enabled("c1") is True


def test_enabled_snapshots(registry):
    registry.enable_level("l1")
    registry.enable_level("l2")
    registry.disable_level("l2")

    snapshot = registry.enabled_levels()
    registry.enable_level("l3")

    assert snapshot == frozenset({"l1"})
    assert registry.enabled_levels() == frozenset({"l1", "l3"})
