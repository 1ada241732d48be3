"""Convention detection: score a name population against every convention."""

from __future__ import annotations

from collections.abc import Iterable

from smart_renamer.core.conventions import base_name, matching_conventions
from smart_renamer.core.enums import CONVENTION_PRIORITY, NamingConvention


def score_conventions(names: Iterable[str]) -> dict[NamingConvention, int]:
    """Count, per convention, how many names satisfy its pattern.

    A name may count for several conventions at once: a single lowercase word
    like ``utils`` is valid camelCase, snake_case and kebab-case. Trailing
    file extensions are ignored.
    """
    scores = {convention: 0 for convention in CONVENTION_PRIORITY}
    for name in names:
        for convention in matching_conventions(base_name(name)):
            scores[convention] += 1
    return scores


def best_convention(scores: dict[NamingConvention, int]) -> NamingConvention | None:
    """Highest score wins, ties go to the earlier convention; all-zero -> None."""
    best: NamingConvention | None = None
    best_score = 0
    for convention in CONVENTION_PRIORITY:
        score = scores.get(convention, 0)
        if score > best_score:
            best, best_score = convention, score
    return best


def detect_convention(names: Iterable[str]) -> NamingConvention | None:
    """Return the dominant convention of a name population, or None."""
    return best_convention(score_conventions(names))


__all__ = ["best_convention", "detect_convention", "score_conventions"]
