"""
Configuration models for Gatelog loggers.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..infrastructure.error_handler import ConfigurationError


# Older option names and the field each one sets; inverted names flip the value
_ALIASES = {
    "allow_disabled": ("force_enforcement", True),
    "allow_logging_disabled": ("force_enforcement", True),
    "force_category_enabling": ("enforce_categories", False),
    "force_level_enabling": ("enforce_levels", False),
}


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable switches read by the dispatch engine and the constructor.

    Every combination is legal. ``enforce_categories`` and ``enforce_levels``
    override ``force_enforcement`` for a single gate when set.
    """

    # Gate enforcement
    force_enforcement: bool = False
    enforce_categories: Optional[bool] = None
    enforce_levels: Optional[bool] = None

    # Seeding at construction
    enable_default_levels: bool = False
    enable_default_category: bool = False

    # Serialize writer invocations
    use_lock: bool = False

    @property
    def allow_disabled(self) -> bool:
        return not self.force_enforcement

    @property
    def categories_enforced(self) -> bool:
        if self.enforce_categories is None:
            return self.force_enforcement
        return self.enforce_categories

    @property
    def levels_enforced(self) -> bool:
        if self.enforce_levels is None:
            return self.force_enforcement
        return self.enforce_levels

    @classmethod
    def from_options(cls, **options: Any) -> "LoggerConfig":
        """
        Build a config from keyword options, accepting historical names.

        Raises:
            ConfigurationError: On unknown names, or when an alias and its
                target disagree.
        """
        known = {f.name for f in fields(cls)}
        values = {}

        for name, value in options.items():
            if name in _ALIASES:
                target, inverted = _ALIASES[name]
                value = (not value) if inverted else value
            elif name in known:
                target = name
            else:
                raise ConfigurationError(f"Unknown logger option: {name}")

            if target in values and values[target] != value:
                raise ConfigurationError(
                    f"Conflicting values for {target} (from option {name})"
                )
            values[target] = value

        return cls(**values)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "LoggerConfig":
        return cls.from_options(**dict(mapping))


__all__ = [
    "LoggerConfig",
]
