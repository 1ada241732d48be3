"""Shared text rendering for analysis commands."""

from __future__ import annotations

from collections.abc import Mapping

from smart_renamer.engine.analysis import AnalysisSummary, FileNamingSummary
from smart_renamer.output import colorize

SECTION_RULE = "═" * 40


def section(title: str) -> None:
    print(colorize(title, "bold"))
    print(colorize(SECTION_RULE, "dim"))


def percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def print_histogram(counts: Mapping[str, int], total: int | None = None) -> None:
    """One line per convention, largest first; the dominant count in green."""
    total = total or sum(counts.values())
    if not total or not counts:
        return
    dominant = max(counts.values())
    for convention, count in sorted(counts.items(), key=lambda kv: -kv[1]):
        if not count:
            continue
        line = f"  {convention:<20} {count:>3} ({percent(count / total)})"
        print(colorize(line, "green") if count == dominant else line)


def print_file_summary(summary: FileNamingSummary) -> None:
    print(f"Total files: {summary.total_files}")
    print(f"Most common convention: {summary.most_common or 'None detected'}")
    print(f"File consistency: {percent(summary.consistency)}\n")
    print_histogram(summary.conventions, summary.total_files)
    print()


def print_code_summary(summary: AnalysisSummary) -> None:
    """Per-category convention histograms; empty categories are omitted."""
    print(f"Total identifiers: {summary.total_identifiers}")
    print(f"Code consistency: {percent(summary.consistency_score)}\n")
    for category, counts in summary.conventions.items():
        if not counts:
            continue
        print(colorize(f"{category.capitalize()} ({sum(counts.values())} total):", "bold"))
        print_histogram(counts)
        print()


def print_violation_counts(counts: Mapping[str, int]) -> None:
    for label, count in sorted(counts.items(), key=lambda kv: -kv[1]):
        print(f"  {label}: {count} violation(s)")


__all__ = [
    "percent",
    "print_code_summary",
    "print_file_summary",
    "print_histogram",
    "print_violation_counts",
    "section",
]
