"""Aggregation: file-name summaries, identifier histograms and batch analysis."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from smart_renamer.core.conventions import classify_name
from smart_renamer.core.detection import best_convention, score_conventions
from smart_renamer.core.enums import (
    CATEGORY_CONFIG_KEYS,
    COMPONENTS_KEY,
    NamingConvention,
)
from smart_renamer.core.models import ConventionConfig, Identifier
from smart_renamer.engine.classifier import classify_tree
from smart_renamer.languages.typescript.parser import ParseError

logger = logging.getLogger(__name__)

MIXED = "mixed"

# Per-file failures that skip the file instead of aborting the batch.
ANALYSIS_ERRORS: tuple[type[BaseException], ...] = (
    ParseError,
    OSError,
    UnicodeDecodeError,
    ValueError,
    TypeError,
    KeyError,
    AttributeError,
    RecursionError,
)


@dataclass(frozen=True)
class FileNamingSummary:
    total_files: int
    conventions: dict[NamingConvention, int]
    most_common: NamingConvention | None
    consistency: float


@dataclass
class AnalysisSummary:
    conventions: dict[str, dict[str, int]] = field(default_factory=dict)
    total_identifiers: int = 0
    consistency_score: float = 0.0


@dataclass
class CodeAnalysisResult:
    identifiers: list[Identifier] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)
    summary: AnalysisSummary = field(default_factory=AnalysisSummary)


def analyze_file_names(names: Iterable[str]) -> FileNamingSummary:
    """Score file names against every convention.

    A name can count toward several conventions, so consistency is the share of
    files following the most common one.
    """
    names = list(names)
    scores = score_conventions(names)
    most_common = best_convention(scores)
    total = len(names)
    consistency = scores[most_common] / total if most_common and total else 0.0
    return FileNamingSummary(total, scores, most_common, consistency)


def summary_key(identifier: Identifier) -> str:
    if identifier.is_component_like:
        return COMPONENTS_KEY
    return CATEGORY_CONFIG_KEYS[identifier.category]


def summarize_identifiers(identifiers: Iterable[Identifier]) -> AnalysisSummary:
    """Histogram each configuration category by the convention its names follow.

    Every category appears, empty or not. The consistency score is the mean,
    over non-empty categories, of the dominant convention's share.
    """
    conventions: dict[str, dict[str, int]] = {
        key: {} for key in ConventionConfig.keys()
    }
    total = 0
    for identifier in identifiers:
        total += 1
        detected = classify_name(identifier.name)
        label = detected.value if detected is not None else MIXED
        bucket = conventions[summary_key(identifier)]
        bucket[label] = bucket.get(label, 0) + 1

    ratios = [
        max(counts.values()) / sum(counts.values())
        for counts in conventions.values()
        if counts
    ]
    consistency = sum(ratios) / len(ratios) if ratios else 0.0
    return AnalysisSummary(conventions, total, consistency)


def analyze_sources(
    paths: Iterable[str],
    *,
    read_source: Callable[[str], str],
    parse_source: Callable[[str, str], Mapping],
) -> CodeAnalysisResult:
    """Read, parse and classify each file, skipping the ones that fail."""
    result = CodeAnalysisResult()
    for path in paths:
        try:
            tree = parse_source(read_source(path), path)
            found = classify_tree(tree, path)
        except ANALYSIS_ERRORS as exc:
            logger.debug("Skipped %s: %s", path, exc)
            result.skipped.append((path, str(exc) or type(exc).__name__))
            continue
        result.identifiers.extend(found)
    result.summary = summarize_identifiers(result.identifiers)
    return result


__all__ = [
    "ANALYSIS_ERRORS",
    "AnalysisSummary",
    "CodeAnalysisResult",
    "FileNamingSummary",
    "MIXED",
    "analyze_file_names",
    "analyze_sources",
    "summarize_identifiers",
    "summary_key",
]
