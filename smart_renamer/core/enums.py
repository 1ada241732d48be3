"""Canonical enums for naming conventions and identifier attributes.

StrEnum values compare equal to their string values
(NamingConvention.CAMEL == "camelCase"), so config files and CLI arguments can
carry the plain tokens.
"""

from __future__ import annotations

import enum


class NamingConvention(enum.StrEnum):
    CAMEL = "camelCase"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"
    PASCAL = "PascalCase"
    UPPER_SNAKE = "UPPER_SNAKE_CASE"


# Tie-break priority: declaration order above.
CONVENTION_PRIORITY: tuple[NamingConvention, ...] = tuple(NamingConvention)


class Category(enum.StrEnum):
    VARIABLE = "variable"
    FUNCTION = "function"
    CLASS = "class"
    CONSTANT = "constant"
    INTERFACE = "interface"
    TYPE = "type"
    ENUM = "enum"


class Scope(enum.StrEnum):
    GLOBAL = "global"
    LOCAL = "local"
    CLASS = "class"
    FUNCTION = "function"


# Configuration key for each identifier category. Component-like identifiers
# are bucketed under "components" by the aggregators.
CATEGORY_CONFIG_KEYS: dict[Category, str] = {
    Category.VARIABLE: "variables",
    Category.FUNCTION: "functions",
    Category.CLASS: "classes",
    Category.CONSTANT: "constants",
    Category.INTERFACE: "interfaces",
    Category.TYPE: "types",
    Category.ENUM: "enums",
}

COMPONENTS_KEY = "components"
COMPONENT_LABEL = "React Component"


def parse_convention(value: object) -> NamingConvention:
    """Return the NamingConvention for a raw token, raising ValueError if unknown."""
    token = str(value).strip()
    try:
        return NamingConvention(token)
    except ValueError:
        valid = ", ".join(c.value for c in NamingConvention)
        raise ValueError(
            f"Invalid convention '{token}'. Valid options: {valid}"
        ) from None


def convention_tokens() -> tuple[str, ...]:
    """Return the convention tokens in priority order."""
    return tuple(c.value for c in CONVENTION_PRIORITY)


__all__ = [
    "CATEGORY_CONFIG_KEYS",
    "COMPONENTS_KEY",
    "COMPONENT_LABEL",
    "CONVENTION_PRIORITY",
    "Category",
    "NamingConvention",
    "Scope",
    "convention_tokens",
    "parse_convention",
]
