"""File-name validation and ranked rename suggestions."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, replace

from smart_renamer.core.conventions import (
    base_name,
    convert_name,
    extension,
    matches_convention,
    segment_words,
)
from smart_renamer.core.enums import CONVENTION_PRIORITY, NamingConvention

PRIMARY_BONUS = 0.2


@dataclass(frozen=True)
class SuggestionResult:
    original: str
    suggested: str
    convention: NamingConvention
    confidence: float


@dataclass(frozen=True)
class FileValidationResult:
    is_valid: bool
    convention: NamingConvention
    message: str
    expected_name: str | None = None


def is_exception(filename: str, exceptions: Collection[str]) -> bool:
    """Exceptions are base names, matched case-insensitively."""
    lowered = {e.lower() for e in exceptions}
    return base_name(filename).lower() in lowered


def validate_file_name(
    filename: str,
    convention: NamingConvention,
    exceptions: Collection[str] = (),
) -> FileValidationResult:
    if is_exception(filename, exceptions):
        return FileValidationResult(
            True, convention, f"File '{filename}' is in the exceptions list"
        )
    if matches_convention(base_name(filename), convention):
        return FileValidationResult(
            True, convention, f"File '{filename}' follows {convention} convention"
        )
    expected = convert_name(base_name(filename), convention) + extension(filename)
    return FileValidationResult(
        False,
        convention,
        f"File '{filename}' should be '{expected}' to follow {convention} convention",
        expected_name=expected,
    )


def calculate_confidence(
    original: str, suggested: str, convention: NamingConvention
) -> float:
    """Score how trustworthy a suggested rename is.

    Identical names score 1.0. Otherwise start at 0.5, add 0.3 when the
    conversion kept the same words and 0.2 when the result satisfies the
    target convention, capped at 1.0.
    """
    if original == suggested:
        return 1.0
    confidence = 0.5
    if segment_words(base_name(original)) == segment_words(base_name(suggested)):
        confidence += 0.3
    if matches_convention(base_name(suggested), convention):
        confidence += 0.2
    return min(confidence, 1.0)


def suggest_name(
    filename: str,
    convention: NamingConvention,
    exceptions: Collection[str] = (),
) -> SuggestionResult:
    if is_exception(filename, exceptions):
        return SuggestionResult(filename, filename, convention, 1.0)
    suggested = convert_name(base_name(filename), convention) + extension(filename)
    return SuggestionResult(
        filename,
        suggested,
        convention,
        calculate_confidence(filename, suggested, convention),
    )


def suggest_multiple_names(
    filename: str,
    primary: NamingConvention,
    exceptions: Collection[str] = (),
) -> list[SuggestionResult]:
    """One suggestion per convention, primary boosted, best first."""
    suggestions = []
    for convention in CONVENTION_PRIORITY:
        suggestion = suggest_name(filename, convention, exceptions)
        if convention == primary:
            suggestion = replace(
                suggestion, confidence=min(suggestion.confidence + PRIMARY_BONUS, 1.0)
            )
        suggestions.append(suggestion)
    return sorted(suggestions, key=lambda s: -s.confidence)


__all__ = [
    "FileValidationResult",
    "SuggestionResult",
    "calculate_confidence",
    "is_exception",
    "suggest_multiple_names",
    "suggest_name",
    "validate_file_name",
]
