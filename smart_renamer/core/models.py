"""Shared value types: identifiers and per-category convention configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from smart_renamer.core.enums import (
    CATEGORY_CONFIG_KEYS,
    Category,
    NamingConvention,
    Scope,
    parse_convention,
)


class ConfigError(ValueError):
    """A configuration value is missing or is not a recognised convention token."""


@dataclass(frozen=True)
class Identifier:
    """One named declaration found in a source file."""

    name: str
    category: Category
    line: int
    column: int
    source_file: str
    scope: Scope = Scope.GLOBAL
    is_exported: bool = False
    is_component_like: bool = False


@dataclass(frozen=True)
class ConventionConfig:
    """Expected convention for each of the eight code categories."""

    variables: NamingConvention = NamingConvention.CAMEL
    functions: NamingConvention = NamingConvention.CAMEL
    components: NamingConvention = NamingConvention.PASCAL
    constants: NamingConvention = NamingConvention.UPPER_SNAKE
    classes: NamingConvention = NamingConvention.PASCAL
    interfaces: NamingConvention = NamingConvention.PASCAL
    types: NamingConvention = NamingConvention.PASCAL
    enums: NamingConvention = NamingConvention.PASCAL

    def for_category(self, category: Category) -> NamingConvention:
        return getattr(self, CATEGORY_CONFIG_KEYS[category])

    def as_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name).value for f in fields(self)}

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ConventionConfig:
        """Build a config from raw tokens; every one of the eight keys is required."""
        missing = [key for key in cls.keys() if key not in data]
        if missing:
            raise ConfigError(f"Missing code convention(s): {', '.join(missing)}")
        values: dict[str, NamingConvention] = {}
        for key in cls.keys():
            try:
                values[key] = parse_convention(data[key])
            except ValueError as exc:
                raise ConfigError(f"code.{key}: {exc}") from exc
        return cls(**values)


__all__ = ["ConfigError", "ConventionConfig", "Identifier"]
