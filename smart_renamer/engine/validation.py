"""Code identifier validation against a per-category convention config."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from smart_renamer.core.conventions import convert_name, matches_convention
from smart_renamer.core.enums import (
    COMPONENT_LABEL,
    CONVENTION_PRIORITY,
    NamingConvention,
)
from smart_renamer.core.models import ConventionConfig, Identifier


@dataclass(frozen=True)
class ValidationOutcome:
    identifier: Identifier
    is_valid: bool
    expected_convention: NamingConvention
    suggested_name: str | None = None
    violation_message: str | None = None


@dataclass
class ValidationSummary:
    total_checked: int = 0
    total_violations: int = 0
    violations_by_category: dict[str, int] = field(default_factory=dict)
    violations: list[ValidationOutcome] = field(default_factory=list)


def expected_convention(
    identifier: Identifier, config: ConventionConfig
) -> NamingConvention:
    """Component-like identifiers are always PascalCase; the rest follow config."""
    if identifier.is_component_like:
        return NamingConvention.PASCAL
    return config.for_category(identifier.category)


def violation_label(identifier: Identifier) -> str:
    return COMPONENT_LABEL if identifier.is_component_like else identifier.category.value


def validate_identifier(
    identifier: Identifier, config: ConventionConfig
) -> ValidationOutcome:
    expected = expected_convention(identifier, config)
    if matches_convention(identifier.name, expected):
        return ValidationOutcome(identifier, True, expected)
    return ValidationOutcome(
        identifier,
        False,
        expected,
        suggested_name=convert_name(identifier.name, expected),
        violation_message=(
            f'{violation_label(identifier)} "{identifier.name}" should use {expected}'
        ),
    )


def validate_identifiers(
    identifiers: Iterable[Identifier], config: ConventionConfig
) -> ValidationSummary:
    """Validate a batch; only invalid outcomes are kept in ``violations``."""
    summary = ValidationSummary()
    for identifier in identifiers:
        summary.total_checked += 1
        outcome = validate_identifier(identifier, config)
        if outcome.is_valid:
            continue
        summary.total_violations += 1
        summary.violations.append(outcome)
        label = violation_label(identifier)
        summary.violations_by_category[label] = (
            summary.violations_by_category.get(label, 0) + 1
        )
    return summary


def suggest_alternatives(
    identifier: Identifier, config: ConventionConfig
) -> list[tuple[NamingConvention, str]]:
    """Spellings under the four other conventions that differ from the original."""
    expected = expected_convention(identifier, config)
    alternatives: list[tuple[NamingConvention, str]] = []
    for convention in CONVENTION_PRIORITY:
        if convention == expected:
            continue
        converted = convert_name(identifier.name, convention)
        if converted != identifier.name:
            alternatives.append((convention, converted))
    return alternatives


__all__ = [
    "ValidationOutcome",
    "ValidationSummary",
    "expected_convention",
    "suggest_alternatives",
    "validate_identifier",
    "validate_identifiers",
    "violation_label",
]
